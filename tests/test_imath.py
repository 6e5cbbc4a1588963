import random

import pytest

from algokit.imath import (
    KLEN,
    dot_product,
    exp_mod,
    is_prime,
    m_based,
    miller_rabin_test,
    test_prime as trial_prime,
    zeros_r,
)


def test_dot_product_with_ones_is_sum():
    k = [3, 9, 27, 81]
    assert dot_product(k, [1] * len(k)) == sum(k)


def test_dot_product_wraps_to_32_bits():
    assert dot_product([1 << 31], [2]) == 0


def test_dot_product_length_mismatch():
    with pytest.raises(ValueError):
        dot_product([1, 2], [1])


@pytest.mark.parametrize("key,m", [(0, 3), (12345, 3), (987654321, 7), ((1 << 64) - 1, 2)])
def test_m_based_reconstructs_key(key, m):
    digits = m_based(key, m)
    assert len(digits) == KLEN
    assert all(0 <= d < m for d in digits)
    assert sum(d * m**i for i, d in enumerate(digits)) == key


def test_m_based_rejects_small_base():
    with pytest.raises(ValueError):
        m_based(10, 1)


@pytest.mark.parametrize("base,exponent,modulus", [(10000, 100000, 997), (2, 10, 1000), (7, 1, 5), (123, 456, 789)])
def test_exp_mod_matches_pow(base, exponent, modulus):
    assert exp_mod(base, exponent, modulus) == pow(base, exponent, modulus)


def test_exp_mod_zero_exponent_is_one():
    assert exp_mod(5, 0, 1) == 1


def test_exp_mod_rejects_zero_modulus():
    with pytest.raises(ValueError):
        exp_mod(2, 3, 0)


def test_zeros_r_documented_example():
    assert zeros_r(104) == 3


def test_zeros_r_zero_is_width():
    assert zeros_r(0) == 32


@pytest.mark.parametrize("k", range(32))
def test_zeros_r_powers_of_two(k):
    assert zeros_r(1 << k) == k
    assert zeros_r((1 << k) | (1 << 31)) == k


def test_trial_prime_small_values():
    primes = [n for n in range(30) if trial_prime(n)]
    assert primes == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]


def test_miller_rabin_never_rejects_a_prime():
    rng = random.Random(1)
    for n in range(2, 2000):
        if trial_prime(n):
            assert miller_rabin_test(n, rng)


def test_is_prime_agrees_with_trial_division():
    for n in range(0, 500):
        assert is_prime(n) == trial_prime(n)