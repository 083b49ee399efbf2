"""Memoised Fibonacci numbers and a small command that prints one."""

import sys

_memo = [0, 1, 1]


def fib(n):
    """Return the n-th Fibonacci number, with fib(1) == fib(2) == 1."""
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    while len(_memo) <= n:
        _memo.append(_memo[-1] + _memo[-2])
    return _memo[n]


def main(argv=None):
    """Print the Fibonacci number for n taken from the arguments or standard input."""
    args = sys.argv[1:] if argv is None else list(argv)
    if args:
        text = args[0]
    else:
        print("Enter the value of n :")
        text = sys.stdin.readline()
    try:
        print(fib(int(text.strip())))
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())