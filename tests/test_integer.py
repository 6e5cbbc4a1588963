import pytest

from algokit.integer import Integer

SAMPLES = ["0", "7", "65535", "65536", "123456789012345678901234567890", "99999999999999999999"]


@pytest.mark.parametrize("text", SAMPLES)
def test_string_round_trip(text):
    assert Integer.from_string(text).to_string() == text


def test_zero_width_integer_prints_zero():
    assert Integer(3).to_string() == "0"
    assert Integer(3).is_zero()


def test_from_string_rejects_non_digits():
    with pytest.raises(ValueError):
        Integer.from_string("12a4")


@pytest.mark.parametrize("a", SAMPLES)
@pytest.mark.parametrize("b", SAMPLES)
def test_addition_and_width(a, b):
    x, y = Integer.from_string(a), Integer.from_string(b)
    total = x + y
    assert int(total) == int(a) + int(b)
    assert len(total) == max(len(x), len(y)) + 1


@pytest.mark.parametrize("a", SAMPLES)
@pytest.mark.parametrize("b", SAMPLES)
def test_subtraction_when_not_negative(a, b):
    if int(a) < int(b):
        a, b = b, a
    x, y = Integer.from_string(a), Integer.from_string(b)
    difference = x - y
    assert int(difference) == int(a) - int(b)
    assert len(difference) == max(len(x), len(y))


@pytest.mark.parametrize("a", SAMPLES)
@pytest.mark.parametrize("b", SAMPLES)
def test_multiplication(a, b):
    x, y = Integer.from_string(a), Integer.from_string(b)
    assert int(x * y) == int(a) * int(b)


@pytest.mark.parametrize("a", SAMPLES)
def test_component_multiplication_and_division(a):
    x = Integer.from_string(a)
    assert int(x * 10) == int(a) * 10
    assert int(x // 10) == int(a) // 10
    assert x % 10 == int(a) % 10


@pytest.mark.parametrize("a", SAMPLES)
@pytest.mark.parametrize("b", ["7", "65536", "123456789"])
def test_integer_modulo(a, b):
    x, y = Integer.from_string(a), Integer.from_string(b)
    remainder = x % y
    assert int(remainder) == int(a) % int(b)
    assert len(remainder) == len(y)


def test_compare_orders_values():
    small, big = Integer.from_string("100"), Integer.from_string("100000")
    assert small.compare(big) == -1
    assert big.compare(small) == 1
    assert small.compare(Integer.from_string("100")) == 0


def test_components_rebuild_value():
    x = Integer.from_string("123456789012345678901234567890")
    assert sum(x[i] << (16 * i) for i in range(len(x))) == int(x)


def test_setitem_changes_component():
    x = Integer(2)
    x[1] = 1
    assert int(x) == 1 << 16
    with pytest.raises(IndexError):
        x[2]


def test_component_operand_must_fit():
    with pytest.raises(ValueError):
        Integer.from_string("5") * 70000


def test_division_by_zero():
    x = Integer.from_string("5")
    with pytest.raises(ZeroDivisionError):
        x // 0
    with pytest.raises(ZeroDivisionError):
        x % Integer(1)