"""Tests for the headless calculator session."""

import logging
import math

import pytest

from phcalc.calculator import (
    POH_RANGE_ERROR,
    POSITIVE_NUMBER_ERROR,
    PHCalculator,
)
from phcalc.chemistry.conversions import InvalidInput
from phcalc.color_scale import NEUTRAL_COLOR


class TestDefaults:
    def test_neutral_water(self):
        calc = PHCalculator()
        assert calc.hydrogen_text == "0.0000001"
        assert calc.hydroxide_text == "0.0000001"
        assert calc.poh_text == "7"
        assert calc.ph == 7.0
        assert calc.method == "hplus"
        assert calc.error == ""

    def test_derived_properties(self):
        calc = PHCalculator()
        assert calc.poh == 7.0
        assert calc.color == NEUTRAL_COLOR
        assert calc.text_color == "black"
        assert calc.classification == "Neutral"
        assert calc.ion_relation == "[H⁺] = [OH⁻]"
        assert calc.progress == 50.0


class TestCalculate:
    def test_from_hydrogen_updates_other_fields(self):
        calc = PHCalculator(hydrogen_text="0.001")
        calc.calculate()
        assert math.isclose(calc.ph, 3.0, abs_tol=1e-12)
        assert calc.hydrogen_text == "0.001"
        assert calc.hydroxide_text == "1.0000000e-11"
        assert calc.poh_text == "11.0000000"
        assert calc.error == ""

    def test_from_hydroxide(self):
        calc = PHCalculator(method="oh", hydroxide_text="1e-2")
        calc.calculate()
        assert math.isclose(calc.ph, 12.0, abs_tol=1e-12)
        assert calc.hydroxide_text == "1e-2"
        assert calc.hydrogen_text == "1.0000000e-12"
        assert calc.poh_text == "2.0000000"

    def test_from_poh(self):
        calc = PHCalculator(method="poh", poh_text="4.5")
        calc.calculate()
        assert calc.ph == 9.5
        assert calc.poh_text == "4.5"
        assert calc.classification == "Basic (Alkaline)"

    @pytest.mark.parametrize("text", ["abc", "", "0", "-3", "nan", "inf", "Infinity"])
    def test_invalid_concentration_keeps_last_value(self, text, caplog):
        calc = PHCalculator(hydrogen_text="0.01")
        calc.calculate()
        calc.hydrogen_text = text
        with caplog.at_level(logging.WARNING, logger="phcalc.calculator"):
            calc.calculate()
        assert calc.error == POSITIVE_NUMBER_ERROR
        assert math.isclose(calc.ph, 2.0, abs_tol=1e-12)
        assert calc.poh_text == "12.0000000"
        assert "Rejected" in caplog.text

    @pytest.mark.parametrize("text", ["15", "-1", "seven"])
    def test_invalid_poh(self, text):
        calc = PHCalculator(method="poh", poh_text=text)
        calc.calculate()
        assert calc.error == POH_RANGE_ERROR
        assert calc.ph == 7.0

    def test_success_clears_error(self):
        calc = PHCalculator(hydrogen_text="nope")
        calc.calculate()
        assert calc.error
        calc.hydrogen_text = "1e-5"
        calc.calculate()
        assert calc.error == ""
        assert math.isclose(calc.ph, 5.0, abs_tol=1e-12)

    def test_solution_method_is_noop(self):
        calc = PHCalculator(method="solution", hydrogen_text="0.1")
        calc.calculate()
        assert calc.ph == 7.0

    def test_unknown_method_rejected(self):
        with pytest.raises(ValueError, match="Unknown calculation method"):
            PHCalculator().set_method("litmus")


class TestSolutionsAndSlider:
    def test_select_solution(self):
        calc = PHCalculator()
        calc.set_method("solution")
        calc.select_solution("Bleach")
        assert calc.selected_solution == "Bleach"
        assert calc.ph == 12.5
        assert calc.poh_text == "1.5000000"
        assert calc.hydroxide_text == "3.1622777e-02"
        assert calc.notes == "Bleach: Sodium hypochlorite cleaner\nFormula: NaClO"
        assert calc.text_color == "white"

    def test_select_unknown_solution(self):
        calc = PHCalculator()
        calc.select_solution("Lava")
        assert calc.selected_solution == "Lava"
        assert calc.ph == 7.0
        assert calc.notes == ""

    def test_select_solution_keeps_pending_error(self):
        calc = PHCalculator(hydrogen_text="abc")
        calc.calculate()
        calc.select_solution("Vinegar")
        assert calc.ph == 2.8
        assert calc.error == POSITIVE_NUMBER_ERROR

    def test_set_ph(self):
        calc = PHCalculator()
        calc.set_ph(4.0)
        assert calc.ph == 4.0
        assert calc.hydrogen_text == "1.0000000e-04"
        assert calc.hydroxide_text == "1.0000000e-10"
        assert calc.poh_text == "10.0000000"

    def test_set_ph_out_of_range(self):
        calc = PHCalculator()
        with pytest.raises(InvalidInput):
            calc.set_ph(14.2)
        assert calc.ph == 7.0
        assert calc.poh_text == "7"

    def test_set_ph_stores_float(self):
        calc = PHCalculator()
        calc.set_ph(9)
        assert isinstance(calc.ph, float)
        assert calc.ph == 9.0


def test_reset_restores_neutral_water():
    calc = PHCalculator()
    calc.set_method("solution")
    calc.select_solution("Lemon Juice")
    calc.hydrogen_text = "bad"
    calc.error = "something"
    calc.reset()
    assert calc == PHCalculator()
