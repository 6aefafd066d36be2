from .magnitude import (
    Magnitude,
    add,
    compare,
    divide_by_small_integer,
    power,
    subtract,
)


MIN_EXPONENT = 2
DEFAULT_EXPONENT = 2


def check_exponent(r: int) -> None:
    if isinstance(r, bool) or not isinstance(r, int):
        raise TypeError(f"root exponent must be int, got {type(r).__name__}")
    if r < MIN_EXPONENT:
        raise ValueError(f"root exponent must be at least {MIN_EXPONENT}, got {r}")


def root(n: Magnitude, r: int) -> None:
    """
    Updates `n` to the integer `r`-th root of its value,
    i.e. the largest g such that g^r <= n, using interval halving.
    `n` is left untouched if `r` is rejected.
    """
    if not isinstance(n, Magnitude):
        raise TypeError(f"expected Magnitude, got {type(n).__name__}")
    check_exponent(r)

    # low^r <= n < high^r holds on every iteration
    low = Magnitude(0)
    high = add(n, 1)
    gap = subtract(high, low)
    while gap.compare_to(1) != 0:
        mid = divide_by_small_integer(add(low, high), 2)
        # power() works on a copy, mid is kept for the bound update
        if compare(power(mid, r), n) > 0:
            high = mid
        else:
            low = mid
        gap = subtract(high, low)

    n.copy_from(low)


def integer_root(n: int, r: int = DEFAULT_EXPONENT) -> int:
    """Computes the largest integer x such that x^r <= n."""
    if n < 0:
        raise ValueError("math domain error")
    check_exponent(r)

    magnitude = Magnitude(n)
    root(magnitude, r)
    return magnitude.to_int()


def integer_root_bounds(n: int, r: int = DEFAULT_EXPONENT) -> tuple[int, int]:
    """Returns (g, g + 1) where g^r <= n < (g + 1)^r."""
    g = integer_root(n, r)
    return g, g + 1


def is_perfect_power_of(n: int, r: int) -> bool:
    """Tests if n is exactly g^r for some natural g."""
    return integer_root(n, r) ** r == n


def is_square(n: int) -> bool:
    """Tests if n is a perfect square."""
    return is_perfect_power_of(n, 2)
