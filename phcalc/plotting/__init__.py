"""
Reference figures for the pH calculator.

Modules:
    scale_plots:
        Color-coded 0-14 pH bar with the reference solutions marked, and
        logarithmic [H⁺]/[OH⁻] curves against pH.

    style:
        Shared Matplotlib rcParams, figure sizes, colors and save helpers.

Design Principle:
    No chemistry calculations in plotting code. Figures only render values
    computed by ``phcalc.chemistry`` and ``phcalc.color_scale``.
"""

from .scale_plots import plot_ion_concentrations, plot_ph_scale
from .style import set_global_style

__all__ = ["plot_ph_scale", "plot_ion_concentrations", "set_global_style"]
