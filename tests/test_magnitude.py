import pytest

from src.magnitude import (
    Magnitude,
    add,
    compare,
    copy,
    divide_by_small_integer,
    power,
    subtract,
)


def test_from_str():
    assert Magnitude.from_str("170141183460469231731687303715884105727") == 2**127 - 1
    assert Magnitude.from_str("  42\n") == 42
    assert Magnitude.from_str("0").is_zero()


@pytest.mark.parametrize("text", ["", "  ", "-1", "+1", "1_000", "12a", "1.5", "٣"])
def test_from_str_rejects_malformed(text):
    with pytest.raises(ValueError):
        Magnitude.from_str(text)


def test_constructor_rejects_bad_values():
    with pytest.raises(ValueError):
        Magnitude(-1)
    with pytest.raises(TypeError):
        Magnitude(1.0)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        Magnitude(True)


def test_in_place_arithmetic():
    n = Magnitude(10)
    n.add(5)
    assert n == 15
    n.subtract(Magnitude(3))
    assert n == 12
    assert n.divide(5) == 2
    assert n == 2
    n.power(10)
    assert n == 1024
    n.clear()
    assert n.is_zero()


def test_subtract_below_zero_keeps_value():
    n = Magnitude(3)
    with pytest.raises(ValueError):
        n.subtract(4)
    assert n == 3


def test_divide_and_power_reject_bad_arguments():
    n = Magnitude(7)
    with pytest.raises(ValueError):
        n.divide(0)
    with pytest.raises(ValueError):
        n.power(-1)
    assert n == 7


def test_zero_to_the_zero():
    n = Magnitude(0)
    n.power(0)
    assert n == 1


def test_copy_does_not_alias():
    a = Magnitude(5)
    b = a.copy()
    b.add(1)
    assert a == 5 and b == 6

    c = Magnitude()
    c.copy_from(a)
    a.add(10)
    assert c == 5
    assert copy(c) is not c


def test_ordering():
    assert Magnitude(3).compare_to(4) == -1
    assert Magnitude(4).compare_to(Magnitude(4)) == 0
    assert Magnitude(5).compare_to(4) == 1
    assert Magnitude(3) < 4 <= Magnitude(4)
    assert Magnitude(2**200) > Magnitude(2**199)
    assert Magnitude(1) != "1"


def test_not_hashable():
    with pytest.raises(TypeError):
        hash(Magnitude(1))


def test_pure_operations_leave_arguments_alone():
    a, b = Magnitude(9), Magnitude(4)
    assert add(a, b) == 13
    assert subtract(a, b) == 5
    assert divide_by_small_integer(a, 2) == 4
    assert power(b, 3) == 64
    assert compare(a, b) == 1
    assert a == 9 and b == 4
    with pytest.raises(ValueError):
        subtract(b, a)


def test_representations():
    n = Magnitude(255)
    assert str(n) == "255"
    assert repr(n) == "Magnitude(255)"
    assert n.diagnostic() == "Magnitude[8 bits](255)"
    assert int(n) == n.to_int() == 255
