"""Reference catalog of common acids and bases with their typical pH.

The catalog is ordered: acids by ascending pH, then pure water, then bases by
ascending pH. It is read-only module data built once at import time.

Pure water is filed under ``"base"``; the catalog has only two kinds and the
neutral entry sits at the acid/base boundary.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

ACID = "acid"
BASE = "base"


@dataclass(frozen=True)
class ReferenceSolution:
    """One named solution from the reference catalog.

    Attributes:
        name: Display name, unique within the catalog.
        kind: ``"acid"`` or ``"base"``.
        typical_ph: Typical pH of the solution at 25 °C.
        formula: Chemical formula of the active species, when meaningful.
        description: Short human-readable description.
    """

    name: str
    kind: str
    typical_ph: float
    formula: Optional[str] = None
    description: Optional[str] = None

    def notes(self) -> str:
        """Return the free-text notes shown when the solution is selected."""
        if not self.description:
            return ""
        formula = f"Formula: {self.formula}" if self.formula else ""
        return f"{self.name}: {self.description}\n{formula}"


_REFERENCE_SOLUTIONS: Tuple[ReferenceSolution, ...] = (
    # Acids
    ReferenceSolution("Battery Acid", ACID, 0.5, "H₂SO₄", "Sulfuric acid used in car batteries"),
    ReferenceSolution("Gastric Acid", ACID, 1.5, "HCl", "Found in stomach acid"),
    ReferenceSolution("Lemon Juice", ACID, 2.4, "C₆H₈O₇", "Citric acid in lemons"),
    ReferenceSolution("Vinegar", ACID, 2.8, "CH₃COOH", "Acetic acid in vinegar"),
    ReferenceSolution("Orange Juice", ACID, 3.5, None, "Citrus juice"),
    ReferenceSolution("Tomato Juice", ACID, 4.3, None, "Slightly acidic fruit juice"),
    ReferenceSolution("Black Coffee", ACID, 5.0, None, "Brewed coffee without additives"),
    ReferenceSolution("Urine", ACID, 6.0, None, "Human urine is slightly acidic"),
    ReferenceSolution("Milk", ACID, 6.5, None, "Slightly acidic dairy product"),
    # Neutral
    ReferenceSolution("Pure Water", BASE, 7.0, "H₂O", "Completely neutral"),
    # Bases
    ReferenceSolution("Blood", BASE, 7.4, None, "Slightly basic human blood"),
    ReferenceSolution("Seawater", BASE, 8.0, None, "Slightly basic ocean water"),
    ReferenceSolution("Baking Soda", BASE, 9.0, "NaHCO₃", "Sodium bicarbonate solution"),
    ReferenceSolution("Milk of Magnesia", BASE, 10.5, "Mg(OH)₂", "Magnesium hydroxide antacid"),
    ReferenceSolution("Household Ammonia", BASE, 11.0, "NH₃", "Cleaning solution"),
    ReferenceSolution("Bleach", BASE, 12.5, "NaClO", "Sodium hypochlorite cleaner"),
    ReferenceSolution("Drain Cleaner", BASE, 14.0, "NaOH", "Sodium hydroxide-based cleaner"),
)

_BY_NAME = {solution.name: solution for solution in _REFERENCE_SOLUTIONS}


def list_reference_solutions() -> Tuple[ReferenceSolution, ...]:
    """Return the reference catalog in its fixed order.

    Returns:
        tuple[ReferenceSolution, ...]: Immutable sequence of 17 solutions,
        from ``Battery Acid`` (pH 0.5) to ``Drain Cleaner`` (pH 14.0).
    """
    return _REFERENCE_SOLUTIONS


def get_reference_solution(name: str) -> ReferenceSolution:
    """Look up a reference solution by exact name.

    Raises:
        KeyError: If no solution with that name exists.
    """
    try:
        return _BY_NAME[name]
    except KeyError:
        raise KeyError(f"Unknown reference solution: {name!r}") from None
