"""Counting ways to climb a staircase with steps of one, two or three."""


def ways_to_top(n: int) -> int:
    """Return the number of ways to climb n stairs using steps of size 1, 2 and 3.

    Values of n up to 2 return n itself.
    """
    if n <= 2:
        return n
    if n == 3:
        return 4
    a, b, c = 1, 2, 4
    for _ in range(n - 3):
        a, b, c = b, c, a + b + c
    return c