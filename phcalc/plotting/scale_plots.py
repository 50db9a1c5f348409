"""Render the color-coded pH scale and ion concentration curves.

Both figures are reference graphics: they receive no measured data and only
draw what ``phcalc.chemistry`` and ``phcalc.color_scale`` compute.
"""

from __future__ import annotations

import logging
import os

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.patches import Rectangle

from ..chemistry.conversions import hydrogen_from_ph, hydroxide_from_ph
from ..chemistry.solutions import ACID, list_reference_solutions
from ..color_scale import color_for_ph, parse_css_color
from ..units import NEUTRAL_PH, PH_MAX, PH_MIN
from .style import (
    GUIDE_COLOR,
    HYDROGEN_LINE_COLOR,
    HYDROXIDE_LINE_COLOR,
    LABEL_CONCENTRATION,
    LABEL_PH,
    STYLE,
    fig_size,
    save_figure,
    set_global_style,
)

logger = logging.getLogger(__name__)

SCALE_RESOLUTION = 0.05


def plot_ph_scale(output_dir: str = "output") -> str:
    """Draw the 0-14 pH color bar with every reference solution marked.

    Acids are labelled above the bar and bases below it so neighbouring
    labels do not collide.

    Args:
        output_dir (str, optional): Directory for ``ph_scale.png``.
            Defaults to ``"output"``.

    Returns:
        str: Path to the saved PNG file.
    """
    set_global_style()
    os.makedirs(output_dir, exist_ok=True)

    fig, ax = plt.subplots(figsize=fig_size("scale"))

    edges = np.arange(PH_MIN, PH_MAX, SCALE_RESOLUTION)
    for left in edges:
        ax.add_patch(
            Rectangle(
                (left, 0.0),
                SCALE_RESOLUTION,
                1.0,
                facecolor=parse_css_color(color_for_ph(left)),
                edgecolor="none",
            )
        )

    for solution in list_reference_solutions():
        above = solution.kind == ACID
        y_tick = (1.0, 1.25) if above else (0.0, -0.25)
        ax.plot(
            [solution.typical_ph, solution.typical_ph],
            y_tick,
            color=GUIDE_COLOR,
            linewidth=STYLE.LINEWIDTH_THIN,
        )
        ax.text(
            solution.typical_ph,
            1.3 if above else -0.3,
            solution.name,
            rotation=60 if above else -60,
            ha="left",
            va="bottom" if above else "top",
            fontsize=STYLE.ANNOTATION_FONTSIZE,
            rotation_mode="anchor",
        )

    ax.axvline(NEUTRAL_PH, color=GUIDE_COLOR, linestyle="--", linewidth=STYLE.LINEWIDTH_THIN)
    ax.set_xlim(PH_MIN, PH_MAX)
    ax.set_ylim(-2.2, 3.2)
    ax.set_xticks(np.arange(PH_MIN, PH_MAX + 1, 1))
    ax.set_yticks([])
    ax.spines["left"].set_visible(False)
    ax.set_xlabel(LABEL_PH)
    ax.set_title("pH scale with common solutions")

    path = save_figure(fig, os.path.join(output_dir, "ph_scale"))
    logger.info("Saved pH scale figure to %s", path)
    return str(path)


def plot_ion_concentrations(output_dir: str = "output") -> str:
    """Plot [H⁺] and [OH⁻] against pH on a logarithmic axis.

    The curves cross at pH 7, where both equal 1e-7 mol dm^-3.

    Args:
        output_dir (str, optional): Directory for ``ion_concentrations.png``.
            Defaults to ``"output"``.

    Returns:
        str: Path to the saved PNG file.
    """
    set_global_style()
    os.makedirs(output_dir, exist_ok=True)

    ph_grid = np.linspace(PH_MIN, PH_MAX, 141)
    hydrogen = [hydrogen_from_ph(float(ph)) for ph in ph_grid]
    hydroxide = [hydroxide_from_ph(float(ph)) for ph in ph_grid]

    fig, ax = plt.subplots(figsize=fig_size("single"))
    ax.semilogy(ph_grid, hydrogen, color=HYDROGEN_LINE_COLOR, label="[H⁺]")
    ax.semilogy(ph_grid, hydroxide, color=HYDROXIDE_LINE_COLOR, label="[OH⁻]")
    ax.axvline(NEUTRAL_PH, color=GUIDE_COLOR, linestyle="--", linewidth=STYLE.LINEWIDTH_THIN)
    ax.plot(
        [NEUTRAL_PH],
        [hydrogen_from_ph(NEUTRAL_PH)],
        marker="o",
        color=GUIDE_COLOR,
        linestyle="none",
        label="Neutral point",
    )
    ax.set_xlim(PH_MIN, PH_MAX)
    ax.set_xlabel(LABEL_PH)
    ax.set_ylabel(LABEL_CONCENTRATION)
    ax.grid(True, which="major")
    ax.legend(loc="center right")

    path = save_figure(fig, os.path.join(output_dir, "ion_concentrations"))
    logger.info("Saved ion concentration figure to %s", path)
    return str(path)
