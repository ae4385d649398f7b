from __future__ import annotations

import pytest

from powcalc.core.power_kernel import DomainError, InputError
from powcalc.integration.calculator import calculate, calculate_display


class TestCalculate:
    def test_basic(self):
        assert calculate("2", "3") == 8.0

    def test_domain_error_propagates(self):
        with pytest.raises(DomainError):
            calculate("0", "-1")

    def test_input_error_raised_before_kernel(self):
        with pytest.raises(InputError):
            calculate("NaN", "2")


class TestCalculateDisplay:
    def test_fixed(self):
        assert calculate_display("4", "0.5").text == "Result: 2.0000000000"

    def test_scientific(self):
        assert calculate_display("10", "30").text == "Result: 1.00e+30"

    def test_scientific_off(self):
        assert calculate_display("0.1", "15", auto_scientific=False).text == "Result: 0.0000000000"

    def test_overflow(self):
        shown = calculate_display("0.1", "-400")
        assert shown.text == "Result: +∞ (Positive Infinity)"
        assert shown.error

    def test_domain_error(self):
        shown = calculate_display("-4", "0.5")
        assert shown.text == "Result: Error"
        assert shown.error.startswith("Error: Negative base with a non-integer exponent")

    def test_empty_field(self):
        shown = calculate_display("", "2")
        assert shown.text == "Result: Error"
        assert shown.error == "Error: Please enter a base value (x)."

    def test_infinite_input(self):
        shown = calculate_display("2", "Infinity")
        assert shown.error == "Error: Exponent value cannot be NaN or Infinity."
