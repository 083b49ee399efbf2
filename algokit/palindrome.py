"""Search for the longest mirrored run in a string."""


def longest_palindrome(s):
    """Return ``(length, middle)`` of the longest mirrored run found in ``s``.

    ``length`` counts matched positions from the centre outwards, first over
    an odd-centred run and then continuing over the even-centred one.
    """
    n = len(s)
    best_len = 0
    best_mid = 0
    for i in range(n):
        offset = 0
        curlen = 0
        while i - offset >= 0 and i + offset < n and s[i - offset] == s[i + offset]:
            curlen += 1
            offset += 1
        if curlen > best_len:
            best_len, best_mid = curlen, i

        while i - offset >= 0 and i + 1 + offset < n and s[i - offset] == s[i + 1 + offset]:
            curlen += 1
            offset += 1
        if curlen > best_len:
            best_len, best_mid = curlen, i
    return best_len, best_mid