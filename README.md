# algokit

A collection of classic algorithms and data structures in plain Python, with
no third-party dependencies.

## What's inside

| Module | Contents |
| --- | --- |
| `algokit.imath` | `dot_product` (wrapped to 32 bits), `m_based` (base-m digits, padded to 64), `mod_exp`, `trailing_zeros` |
| `algokit.primes` | `test_prime` (trial division), `miller_rabin_test`, `is_prime` |
| `algokit.byteorder` | `is_big_endian`, `byte_swap2`, `byte_swap4`, `byte_swap8` |
| `algokit.gb18030` | `read_char` returns `(word, length)` for one GB18030 character; `encode_char` gives its bytes back |
| `algokit.memoization` | memoised `fib` and the `algokit-fib` command |
| `algokit.palindrome` | `longest_palindrome`, returning `(length, middle)` |
| `algokit.b64` | Base64 `encode`, a lenient `decode`, and `index_of_code` |
| `algokit.integer` | `Integer`, an unsigned integer of a fixed number of 16-bit components |
| `algokit.dictionary` | `Dictionary`, a bucket-and-entry hash table, and `get_next_prime` |
| `algokit.circular_queue` | `BoundedQueue` and `QueueEmptyError` |
| `algokit.lru_cache` | `LRUCache` |
| `algokit.suffix_array` | `SuffixArray` with `lcp_length` |
| `algokit.linked_list` | `LinkedList` and `ListNode`, with `splice`, `move_to_front` and `move_ahead_one` |
| `algokit.bst` | `BinarySearchTree`, with `items()` in key order and a sideways `render()` |
| `algokit.sorting` | `bubble_sort`, `shell_sort`, `random_select` (quickselect) and the `Sorter` class |

A few behaviours worth knowing:

- `LRUCache.get` raises `KeyError` for a missing key; `items()` lists entries
  from most to least recently used.
- `BoundedQueue.enqueue` returns `False` when the queue is full, `dequeue`
  returns `None` when it is empty, and `front` raises `QueueEmptyError`.
- `Integer` results have the widths their operations define (a sum is one
  component wider, a product twice the wider operand), and values that do not
  fit are cut to that width. `Integer.from_string` sizes the result to hold
  any decimal number of the given length.
- `b64.decode` treats characters outside the alphabet (padding included) as
  zero, ignores a trailing partial group, and stops each group's bytes at the
  first zero byte.
- `Sorter(items, comp)` sorts `items` in place; `comp(a, b)` returns `True`
  when `a` belongs after `b`, and defaults to `>`.

## Install

```
pip install .
```

## Examples

```python
from algokit.lru_cache import LRUCache

cache = LRUCache(2)
cache.put("a", 1)
cache.put("b", 2)
cache.get("a")          # "a" becomes the most recently used entry
cache.put("c", 3)       # evicts "b"
print(cache.items())    # [('c', 3), ('a', 1)]
```

```python
from algokit.integer import Integer

n = Integer.from_string("123456789012345678901234567890")
print(n * Integer.from_string("1000"))
```

```python
from algokit.suffix_array import SuffixArray

sa = SuffixArray("banana")
print([sa[i] for i in range(len(sa))])
print(sa.lcp_length(1, 3))
```

```python
from algokit.sorting import Sorter

items = [5, 2, 9, 1]
Sorter(items, lambda a, b: a > b).heap_sort()
print(items)
```

## Command line

`algokit-fib` prints the n-th Fibonacci number (with `fib(1) == fib(2) == 1`).
It takes n as its first argument, or reads it from standard input when no
argument is given:

```
algokit-fib 50
echo 50 | algokit-fib
```

An invalid n prints an error to standard error and exits with status 1.

## What it does not do

This is a library of in-memory building blocks. Apart from `algokit-fib` it
has no command-line tools, and nothing is persisted to disk.

## Running the tests

```
pip install ".[test]"
pytest
```