import pytest

from pushswap.arith import (
    compute_power,
    compute_square_root,
    find_prime_sup,
    get_number,
    is_prime,
    sign_letter,
    sort_ints,
    swap,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("-5", -5),
        ("--7", 7),
        ("12ab34", 12),
        ("+-+3", -3),
        ("2147483647", 2147483647),
    ],
)
def test_get_number_parses_prefix(text, expected):
    assert get_number(text) == expected


def test_get_number_without_digits_is_zero():
    assert get_number("abc") == 0
    assert get_number("") == 0


def test_get_number_overflow_is_zero():
    assert get_number("2147483648") == 0
    assert get_number("99999999999999") == 0


@pytest.mark.parametrize("nb, power", [(5, 3), (-3, 3), (0, 3), (2, 10), (7, 1)])
def test_compute_power_matches_operator(nb, power):
    assert compute_power(nb, power) == nb**power


def test_compute_power_zero_exponent():
    assert compute_power(5, 0) == 1


def test_compute_power_negative_exponent():
    assert compute_power(5, -3) == 0


def test_compute_power_overflow():
    assert compute_power(4567890, 73) == 0


@pytest.mark.parametrize("root", range(1, 40))
def test_square_root_of_perfect_square(root):
    assert compute_square_root(root * root) == root


@pytest.mark.parametrize("nb", [0, 8, -3, 2, 26])
def test_square_root_of_non_square_is_zero(nb):
    assert compute_square_root(nb) == 0


@pytest.mark.parametrize("nb", [2, 3, 5, 7, 11, 13, 97, 101])
def test_is_prime_accepts_primes(nb):
    assert is_prime(nb)


@pytest.mark.parametrize("nb", [-7, 0, 1, 9, 15, 27, 100])
def test_is_prime_rejects_others(nb):
    assert not is_prime(nb)


def test_is_prime_exclusive_bound_accepts_four():
    assert is_prime(4)


@pytest.mark.parametrize("nb", [0, 1, 2, 3, 5, 8, 19, 27, 814])
def test_find_prime_sup_is_next_accepted(nb):
    found = find_prime_sup(nb)
    assert found >= nb
    assert is_prime(found)
    assert not any(is_prime(k) for k in range(nb, found))


def test_find_prime_sup_keeps_prime():
    assert find_prime_sup(13) == 13


def test_sign_letter():
    assert sign_letter(-3) == "N"
    assert sign_letter(0) == "P"
    assert sign_letter(12) == "P"


def test_sort_ints_orders_and_does_not_mutate():
    data = [4, 0, 90, 17, 21]
    result = sort_ints(data)
    assert result == sorted(data)
    assert data == [4, 0, 90, 17, 21]
    assert all(a <= b for a, b in zip(result, result[1:]))


def test_swap():
    assert swap(12, 21) == (21, 12)