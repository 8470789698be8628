"""
Tests for rampcurves/utilities.py
"""

import numpy as np

from rampcurves.utilities import epsilon, FuzzyEquals, FuzzyZero, GenerateStringFromVector


class TestFuzzyComparisons:

    def test_fuzzy_equals(self):
        assert FuzzyEquals(1.0, 1.0 + 0.5*epsilon, epsilon)
        assert not FuzzyEquals(1.0, 1.0 + 2*epsilon, epsilon)

    def test_fuzzy_zero(self):
        assert FuzzyZero(-0.5*epsilon, epsilon)
        assert not FuzzyZero(1e-6, epsilon)


class TestGenerateStringFromVector:

    def test_format(self):
        assert GenerateStringFromVector([1, 0.25]) == "[ 1.000000000000000e+00, 2.500000000000000e-01]"

    def test_empty(self):
        assert GenerateStringFromVector([]) == "[ ]"

    def test_numpy_array(self):
        assert GenerateStringFromVector(np.array([-3.0])) == "[ -3.000000000000000e+00]"
