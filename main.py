#!/usr/bin/env python3
"""
Command-line pH calculator.
"""

# Usage overview:
# 1) Give exactly one input: [H⁺], [OH⁻], pOH, pH, or a reference solution.
# 2) The pH is computed on the 0-14 scale and printed with pOH, both ion
#    concentrations, the display color and the acid/base classification.
# 3) Optionally list the reference catalog, export CSV tables, or render the
#    pH scale and ion concentration figures.

import argparse
import logging
import sys

from phcalc.calculator import PHCalculator
from phcalc.chemistry.conversions import InvalidInput
from phcalc.chemistry.solutions import get_reference_solution, list_reference_solutions
from phcalc.output import save_tables_to_csv
from phcalc.plotting import plot_ion_concentrations, plot_ph_scale
from phcalc.reporting import summary_lines


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Convert between pH, pOH, [H⁺] and [OH⁻] at 25 °C."
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--hydrogen", metavar="C", help="[H⁺] in mol/L")
    source.add_argument("--hydroxide", metavar="C", help="[OH⁻] in mol/L")
    source.add_argument("--poh", metavar="VALUE", help="pOH between 0 and 14")
    source.add_argument("--ph", metavar="VALUE", type=float, help="pH between 0 and 14")
    source.add_argument("--solution", metavar="NAME", help="reference solution name")
    parser.add_argument(
        "--list-solutions", action="store_true", help="print the reference catalog"
    )
    parser.add_argument("--export", metavar="DIR", help="write CSV tables to DIR")
    parser.add_argument("--plots", metavar="DIR", help="write figures to DIR")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def run_calculator(args: argparse.Namespace) -> PHCalculator:
    """Drive a calculator session from parsed arguments.

    Raises:
        InvalidInput: If the input is rejected or the solution is unknown.
    """
    calc = PHCalculator()
    if args.hydrogen is not None:
        calc.set_method("hplus")
        calc.hydrogen_text = args.hydrogen
        calc.calculate()
    elif args.hydroxide is not None:
        calc.set_method("oh")
        calc.hydroxide_text = args.hydroxide
        calc.calculate()
    elif args.poh is not None:
        calc.set_method("poh")
        calc.poh_text = args.poh
        calc.calculate()
    elif args.ph is not None:
        calc.set_ph(args.ph)
    elif args.solution is not None:
        try:
            get_reference_solution(args.solution)
        except KeyError as exc:
            raise InvalidInput(exc.args[0]) from None
        calc.set_method("solution")
        calc.select_solution(args.solution)
    if calc.error:
        raise InvalidInput(calc.error)
    return calc


def main(argv=None):
    """Parse arguments, run the requested conversion and write outputs."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    if args.list_solutions:
        for solution in list_reference_solutions():
            formula = f" ({solution.formula})" if solution.formula else ""
            print(f"{solution.typical_ph:>5.1f}  {solution.kind:<4}  {solution.name}{formula}")

    try:
        calc = run_calculator(args)
    except InvalidInput as exc:
        logging.error("Invalid input: %s", exc)
        return 1

    for line in summary_lines(calc.ph):
        print(line)
    if calc.notes:
        print(calc.notes.rstrip())

    if args.export:
        table_csv, solutions_csv = save_tables_to_csv(args.export)
        logging.info("  - Conversion table CSV: %s", table_csv)
        logging.info("  - Reference solutions CSV: %s", solutions_csv)

    if args.plots:
        logging.info("  - pH scale figure: %s", plot_ph_scale(args.plots))
        logging.info("  - Ion concentration figure: %s", plot_ion_concentrations(args.plots))

    return 0


if __name__ == "__main__":
    sys.exit(main())
