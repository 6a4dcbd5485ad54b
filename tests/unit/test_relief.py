"""Unit tests for relief policies."""

import pytest

from monkeysim.core.errors import WorryOverflowError
from monkeysim.core.operations import IntegerBounds
from monkeysim.core.relief import ReliefMode, ReliefPolicy, compute_modulus


class TestComputeModulus:
    """Tests for compute_modulus."""

    def test_product_of_divisors(self):
        assert compute_modulus([23, 19, 13, 17]) == 96577

    def test_duplicates_counted_once(self):
        assert compute_modulus([3, 5, 3, 5]) == 15

    def test_empty_is_one(self):
        assert compute_modulus([]) == 1

    def test_overflow_rejected(self):
        bounds = IntegerBounds.for_dtype("int16")
        with pytest.raises(WorryOverflowError):
            compute_modulus([101, 103, 107], bounds)

    def test_overflow_int64(self):
        # 20 distinct primes above 1000 overflow 64 bits
        primes = [1009, 1013, 1019, 1021, 1031, 1033, 1039, 1049, 1051, 1061,
                  1063, 1069, 1087, 1091, 1093, 1097, 1103, 1109, 1117, 1123]
        with pytest.raises(WorryOverflowError):
            compute_modulus(primes)

    def test_non_positive_divisor_rejected(self):
        with pytest.raises(ValueError):
            compute_modulus([3, 0])


class TestDivideRelief:
    """Tests for DIVIDE mode."""

    def test_truncates(self):
        policy = ReliefPolicy.divide()
        assert policy.apply(1501) == 500
        assert policy.apply(2) == 0

    def test_truncates_toward_zero(self):
        policy = ReliefPolicy.divide()
        assert policy.apply(-7) == -2

    def test_mode(self):
        assert ReliefPolicy.divide().mode is ReliefMode.DIVIDE


class TestModulusRelief:
    """Tests for MODULUS mode."""

    def test_reduces(self):
        policy = ReliefPolicy.with_modulus(96577)
        assert policy.apply(96577 * 5 + 11) == 11

    def test_small_values_unchanged(self):
        policy = ReliefPolicy.with_modulus(96577)
        assert policy.apply(1234) == 1234

    def test_requires_positive_modulus(self):
        with pytest.raises(ValueError):
            ReliefPolicy(mode=ReliefMode.MODULUS)
        with pytest.raises(ValueError):
            ReliefPolicy.with_modulus(0)

    def test_keeps_divisibility_outcomes(self):
        divisors = [23, 19, 13, 17]
        policy = ReliefPolicy.with_modulus(compute_modulus(divisors))
        for value in [0, 1, 22, 23, 96577, 96578, 123456789, 2**40 + 7, 19 * 13 * 10**6]:
            reduced = policy.apply(value)
            for d in divisors:
                assert (reduced % d == 0) == (value % d == 0)

    def test_check_divisors_accepts_multiple(self):
        ReliefPolicy.with_modulus(2 * 3 * 5).check_divisors([2, 3, 5, 2])

    def test_check_divisors_names_uncovered(self):
        with pytest.raises(ValueError, match=r"\[13, 17\]"):
            ReliefPolicy.with_modulus(23 * 19).check_divisors([23, 19, 13, 17])

    def test_check_divisors_ignored_for_divide(self):
        ReliefPolicy.divide().check_divisors([7, 11])


class TestForSimulation:
    """Tests for ReliefPolicy.for_simulation."""

    def test_divide(self, example_simulation):
        policy = ReliefPolicy.for_simulation(ReliefMode.DIVIDE, example_simulation)
        assert policy.mode is ReliefMode.DIVIDE
        assert policy.modulus is None

    def test_modulus_from_divisors(self, example_simulation):
        policy = ReliefPolicy.for_simulation("modulus", example_simulation)
        assert policy.mode is ReliefMode.MODULUS
        assert policy.modulus == 23 * 19 * 13 * 17

    def test_unknown_mode(self, example_simulation):
        with pytest.raises(ValueError):
            ReliefPolicy.for_simulation("halve", example_simulation)

    def test_str(self):
        assert str(ReliefPolicy.divide()) == "divide by 3"
        assert str(ReliefPolicy.with_modulus(15)) == "modulus 15"
