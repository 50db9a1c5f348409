"""
A Python package for converting between pH, pOH, and ion concentrations.

Works on the standard 0-14 scale for aqueous solutions at 25 °C.

Modules:
    - chemistry: Conversions between pH, pOH, [H⁺] and [OH⁻], and the
      reference catalog of common acids and bases.
    - color_scale: Maps pH values to display colors.
    - calculator: Headless calculator session with input validation.
    - reporting: Display formatting and conversion tables.
    - output: CSV export of the tables.
    - plotting: pH scale and ion concentration figures.
"""

__version__ = "1.0.0"

from .calculator import PHCalculator
from .chemistry import (
    InvalidInput,
    ReferenceSolution,
    get_reference_solution,
    hydrogen_from_ph,
    hydroxide_from_ph,
    list_reference_solutions,
    ph_from_hydrogen,
    ph_from_hydroxide,
    ph_from_poh,
)
from .color_scale import color_for_ph
from .output import save_tables_to_csv
from .reporting import conversion_table, reference_solutions_table

__all__ = [
    # Conversions
    "InvalidInput",
    "ph_from_hydrogen",
    "ph_from_hydroxide",
    "ph_from_poh",
    "hydrogen_from_ph",
    "hydroxide_from_ph",
    # Colors and catalog
    "color_for_ph",
    "ReferenceSolution",
    "get_reference_solution",
    "list_reference_solutions",
    # Session and reporting
    "PHCalculator",
    "conversion_table",
    "reference_solutions_table",
    "save_tables_to_csv",
]
