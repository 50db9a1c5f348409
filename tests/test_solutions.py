"""Tests for the reference solution catalog."""

import dataclasses

import pytest

from phcalc.chemistry.solutions import (
    ReferenceSolution,
    get_reference_solution,
    list_reference_solutions,
)


def test_catalog_size_and_order():
    solutions = list_reference_solutions()
    assert len(solutions) == 17
    assert solutions[0].name == "Battery Acid"
    assert solutions[0].typical_ph == 0.5
    assert solutions[-1].name == "Drain Cleaner"
    assert solutions[-1].typical_ph == 14.0


def test_pure_water_present():
    water = get_reference_solution("Pure Water")
    assert water.typical_ph == 7.0
    assert water in list_reference_solutions()


def test_acids_precede_bases_in_ascending_ph():
    solutions = list_reference_solutions()
    kinds = [s.kind for s in solutions]
    assert kinds == ["acid"] * 9 + ["base"] * 8
    phs = [s.typical_ph for s in solutions]
    assert phs == sorted(phs)


def test_catalog_is_immutable():
    solutions = list_reference_solutions()
    assert isinstance(solutions, tuple)
    with pytest.raises(dataclasses.FrozenInstanceError):
        solutions[0].typical_ph = 1.0  # type: ignore
    assert list_reference_solutions() is solutions


def test_optional_fields():
    orange = get_reference_solution("Orange Juice")
    assert orange.formula is None
    assert orange.description == "Citrus juice"


def test_unknown_name_raises():
    with pytest.raises(KeyError, match="Unknown reference solution"):
        get_reference_solution("Lava")


def test_notes_with_formula():
    vinegar = get_reference_solution("Vinegar")
    assert vinegar.notes() == "Vinegar: Acetic acid in vinegar\nFormula: CH₃COOH"


def test_notes_without_formula_or_description():
    assert get_reference_solution("Milk").notes() == "Milk: Slightly acidic dairy product\n"
    assert ReferenceSolution("Mystery", "acid", 4.0).notes() == ""
