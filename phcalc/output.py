"""Write pH conversion and reference tables to CSV files."""

from __future__ import annotations

import logging
import os
from typing import Iterable, Tuple

from .reporting import conversion_table, reference_solutions_table

logger = logging.getLogger(__name__)


def save_tables_to_csv(
    output_dir: str = "output", ph_values: Iterable[float] | None = None
) -> Tuple[str, str]:
    """Save the conversion table and the reference catalog to CSV files.

    Args:
        output_dir (str): Directory where CSV outputs are written; created if
            missing.
        ph_values (Iterable[float] | None): pH values for the conversion
            table. Defaults to 0-14 in steps of 0.5.

    Returns:
        tuple[str, str]: Paths to ``conversion_table.csv`` and
        ``reference_solutions.csv``.
    """
    os.makedirs(output_dir, exist_ok=True)

    table_path = os.path.join(output_dir, "conversion_table.csv")
    solutions_path = os.path.join(output_dir, "reference_solutions.csv")

    conversion_table(ph_values).to_csv(table_path, index=False)
    reference_solutions_table().to_csv(solutions_path, index=False)

    logger.info("Saved conversion table to %s", table_path)
    logger.info("Saved reference solutions to %s", solutions_path)

    return table_path, solutions_path
