"""Centralized plotting style, labels, and save helpers."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

import matplotlib.pyplot as plt
from matplotlib.figure import Figure

OUTPUT_FORMATS: tuple[str, ...] = ("png",)
FIGURE_DPI = 300
_STYLE_STATE = {"initialized": False}


@dataclass(frozen=True)
class StyleConfig:
    BASE_FONTSIZE: float = 12.0
    TITLE_FONTSIZE: float = 14.0
    LABEL_FONTSIZE: float = 12.0
    TICK_FONTSIZE: float = 11.0
    LEGEND_FONTSIZE: float = 11.0
    ANNOTATION_FONTSIZE: float = 9.0
    LINEWIDTH: float = 2.0
    LINEWIDTH_THIN: float = 1.2
    MARKERSIZE: float = 6.0
    GRID_ALPHA: float = 0.20
    FIGSIZE_SINGLE: tuple[float, float] = (7.0, 4.2)
    FIGSIZE_SCALE: tuple[float, float] = (11.0, 3.6)


STYLE = StyleConfig()

FIG_SIZES: dict[str, tuple[float, float]] = {
    "single": STYLE.FIGSIZE_SINGLE,
    "scale": STYLE.FIGSIZE_SCALE,
}

HYDROGEN_LINE_COLOR = "#a50f15"
HYDROXIDE_LINE_COLOR = "#004371"
GUIDE_COLOR = "#4A4A4A"

LABEL_PH = "pH"
LABEL_CONCENTRATION = r"Concentration / mol dm$^{-3}$"


def apply_global_style(font_scale: float = 1.0) -> None:
    """Apply global Matplotlib style scaled by ``font_scale``."""
    scale = float(font_scale)
    plt.rcParams.update(
        {
            "font.family": "STIXGeneral",
            "font.size": STYLE.BASE_FONTSIZE * scale,
            "axes.titlesize": STYLE.TITLE_FONTSIZE * scale,
            "axes.labelsize": STYLE.LABEL_FONTSIZE * scale,
            "xtick.labelsize": STYLE.TICK_FONTSIZE * scale,
            "ytick.labelsize": STYLE.TICK_FONTSIZE * scale,
            "legend.fontsize": STYLE.LEGEND_FONTSIZE * scale,
            "mathtext.fontset": "stix",
            "mathtext.default": "regular",
            "axes.linewidth": STYLE.LINEWIDTH_THIN,
            "axes.spines.top": False,
            "axes.spines.right": False,
            "grid.alpha": STYLE.GRID_ALPHA,
            "grid.linestyle": ":",
            "legend.frameon": False,
            "lines.linewidth": STYLE.LINEWIDTH,
            "lines.markersize": STYLE.MARKERSIZE,
            "figure.dpi": 120,
            "savefig.dpi": FIGURE_DPI,
            "savefig.bbox": "tight",
            "savefig.pad_inches": 0.12,
        }
    )


def set_global_style() -> None:
    """Apply global plotting style once per process."""
    if not _STYLE_STATE["initialized"]:
        apply_global_style(font_scale=1.0)
        _STYLE_STATE["initialized"] = True


def fig_size(kind: str = "single") -> tuple[float, float]:
    """Return standardized figure size tuple for a named figure kind."""
    return FIG_SIZES.get(kind, STYLE.FIGSIZE_SINGLE)


def save_figure(
    fig: Figure,
    savepath_base: str | Path,
    formats: Sequence[str] = OUTPUT_FORMATS,
    dpi: int = FIGURE_DPI,
) -> Path:
    """Save a figure to each format using one extensionless base path.

    The figure is closed after saving.
    """
    base = Path(savepath_base)
    base.parent.mkdir(parents=True, exist_ok=True)
    for ext in formats:
        fig.savefig(str(base.with_suffix(f".{ext}")), dpi=dpi if ext == "png" else None)
    plt.close(fig)
    return base.with_suffix(f".{formats[0]}")
