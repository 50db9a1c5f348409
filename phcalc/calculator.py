"""Headless pH calculator session.

``PHCalculator`` holds the state of an interactive pH calculator form: one
text field per input method ([H⁺], [OH⁻], pOH), the current pH, a selected
reference solution with free-text notes, and the last validation message.

Input handling rules:
    - Text fields are parsed with ``float``. Unparseable text, non-positive
      concentrations and out-of-range pOH set ``error`` and leave every other
      field untouched, so the last valid result stays on display.
    - A successful calculation clears ``error`` and rewrites the other fields
      from the new pH (concentrations in exponential notation, pOH with seven
      decimals).
    - ``reset`` restores neutral water: [H⁺] = [OH⁻] = 1e-7 mol/L, pOH = pH = 7.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from .chemistry.conversions import (
    classify_ph,
    hydrogen_from_ph,
    hydroxide_from_ph,
    ion_relation,
    ph_from_hydrogen,
    ph_from_hydroxide,
    ph_from_poh,
    poh_from_ph,
    validate_ph,
)
from .chemistry.solutions import get_reference_solution
from .color_scale import color_for_ph, text_color_for_ph
from .reporting import format_concentration, format_poh
from .units import (
    DEFAULT_HYDROGEN_TEXT,
    DEFAULT_HYDROXIDE_TEXT,
    DEFAULT_POH_TEXT,
    NEUTRAL_PH,
    PH_MAX,
    PKW,
)

logger = logging.getLogger(__name__)

METHODS = ("hplus", "oh", "poh", "solution")

POSITIVE_NUMBER_ERROR = "Please enter a valid positive number"
POH_RANGE_ERROR = "pOH must be between 0 and 14"


def _parse_number(text: str) -> float | None:
    """Parse a text field, treating ``nan`` and ``inf`` as unparseable."""
    try:
        value = float(str(text).strip())
    except ValueError:
        return None
    return value if math.isfinite(value) else None


@dataclass
class PHCalculator:
    """Mutable state of one calculator session.

    Attributes:
        hydrogen_text: Text of the [H⁺] field in mol/L.
        hydroxide_text: Text of the [OH⁻] field in mol/L.
        poh_text: Text of the pOH field.
        ph: Current pH value.
        error: Last validation message, empty when the last action succeeded.
        method: Active input method, one of ``METHODS``.
        selected_solution: Name of the selected reference solution.
        notes: Free-text notes about the selected solution.
    """

    hydrogen_text: str = DEFAULT_HYDROGEN_TEXT
    hydroxide_text: str = DEFAULT_HYDROXIDE_TEXT
    poh_text: str = DEFAULT_POH_TEXT
    ph: float = NEUTRAL_PH
    error: str = ""
    method: str = "hplus"
    selected_solution: str = ""
    notes: str = ""

    @property
    def poh(self) -> float:
        return PKW - self.ph

    @property
    def color(self) -> str:
        return color_for_ph(self.ph)

    @property
    def text_color(self) -> str:
        return text_color_for_ph(self.ph)

    @property
    def classification(self) -> str:
        return classify_ph(self.ph)

    @property
    def ion_relation(self) -> str:
        return ion_relation(self.ph)

    @property
    def progress(self) -> float:
        """Position of the current pH along the scale, in percent."""
        return self.ph / PH_MAX * 100.0

    def set_method(self, method: str) -> None:
        if method not in METHODS:
            raise ValueError(f"Unknown calculation method {method!r}; expected one of {METHODS}")
        self.method = method

    def _fail(self, message: str, raw: str) -> None:
        logger.warning("Rejected %s input %r: %s", self.method, raw, message)
        self.error = message

    def _refresh_fields(self, ph: float, *, skip: str = "") -> None:
        if skip != "hplus":
            self.hydrogen_text = format_concentration(hydrogen_from_ph(ph))
        if skip != "oh":
            self.hydroxide_text = format_concentration(hydroxide_from_ph(ph))
        if skip != "poh":
            self.poh_text = format_poh(poh_from_ph(ph))

    def _accept(self, ph: float, *, skip: str = "") -> None:
        self.error = ""
        self.ph = ph
        self._refresh_fields(ph, skip=skip)
        logger.debug("pH set to %.4f via %s", ph, self.method)

    def calculate_from_hydrogen(self) -> None:
        concentration = _parse_number(self.hydrogen_text)
        if concentration is None or concentration <= 0:
            self._fail(POSITIVE_NUMBER_ERROR, self.hydrogen_text)
            return
        self._accept(ph_from_hydrogen(concentration), skip="hplus")

    def calculate_from_hydroxide(self) -> None:
        concentration = _parse_number(self.hydroxide_text)
        if concentration is None or concentration <= 0:
            self._fail(POSITIVE_NUMBER_ERROR, self.hydroxide_text)
            return
        self._accept(ph_from_hydroxide(concentration), skip="oh")

    def calculate_from_poh(self) -> None:
        poh = _parse_number(self.poh_text)
        if poh is None or not 0 <= poh <= PH_MAX:
            self._fail(POH_RANGE_ERROR, self.poh_text)
            return
        self._accept(ph_from_poh(poh), skip="poh")

    def calculate(self) -> None:
        """Run the calculation for the active input method."""
        if self.method == "hplus":
            self.calculate_from_hydrogen()
        elif self.method == "oh":
            self.calculate_from_hydroxide()
        elif self.method == "poh":
            self.calculate_from_poh()
        # "solution": the selection already set the pH.

    def select_solution(self, name: str) -> None:
        """Select a reference solution and move the calculator to its pH.

        Unknown names are recorded as the selection but change nothing else.
        A pending validation message is left in place; only a successful
        calculation or ``reset`` clears it.
        """
        self.selected_solution = name
        try:
            solution = get_reference_solution(name)
        except KeyError:
            logger.debug("No reference solution named %r", name)
            return
        self.ph = solution.typical_ph
        self._refresh_fields(solution.typical_ph)
        if solution.description:
            self.notes = solution.notes()
        logger.debug("Selected %s (pH %.1f)", solution.name, solution.typical_ph)

    def set_ph(self, ph: float) -> None:
        """Set pH directly, as a slider would, and refresh every field.

        Raises:
            InvalidInput: If ``ph`` is outside 0-14.
        """
        self.ph = validate_ph(ph)
        self._refresh_fields(self.ph)
        logger.debug("pH set to %.4f via slider", self.ph)

    def reset(self) -> None:
        """Restore the neutral-water defaults."""
        self.hydrogen_text = DEFAULT_HYDROGEN_TEXT
        self.hydroxide_text = DEFAULT_HYDROXIDE_TEXT
        self.poh_text = DEFAULT_POH_TEXT
        self.ph = NEUTRAL_PH
        self.error = ""
        self.selected_solution = ""
        self.notes = ""
        self.method = "hplus"
        logger.debug("Calculator reset to neutral water")
