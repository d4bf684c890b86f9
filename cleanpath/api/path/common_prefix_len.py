"""Count shared leading segments."""


def common_prefix_len(a: list[str], b: list[str]) -> int:
    """Return the number of leading segments ``a`` and ``b`` share.

    Comparison is exact and case-sensitive.
    """
    n = 0
    for left, right in zip(a, b):
        if left != right:
            break
        n += 1
    return n
