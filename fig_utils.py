"""Figure saving utilities for the demo and grid plots.

Usage:
  from fig_utils import set_figure_dir, save_fig, set_fig_formats
  set_fig_formats(["png"])  # default already png
  set_figure_dir("sine")
  ... plot ...
  save_fig("grid_predictions.png")

Design:
- Only manages paths and formats; NO plotting logic.
- FIG_FORMATS always non-empty; defaults to ["png"].
"""
from __future__ import annotations
import os
import logging
from datetime import datetime
import matplotlib.pyplot as plt

logger = logging.getLogger(__name__)

RUN_TAG = datetime.now().strftime('%Y%m%d_%H%M%S')
FIG_SAVE_ROOT = os.path.join(os.getcwd(), 'figures')
CURRENT_FIG_SAVE_DIR: str | None = None
SUPPORTED_FORMATS = ("png", "svg", "pdf")
FIG_FORMATS = ["png"]  # mutable list


def set_fig_formats(formats):
    """Configure output formats. Unsupported entries are dropped, duplicates removed
    preserving order; an empty result falls back to ['png'].
    """
    global FIG_FORMATS
    cleaned = []
    for f in (formats or []):
        f = str(f).lower().strip()
        if f in SUPPORTED_FORMATS and f not in cleaned:
            cleaned.append(f)
    FIG_FORMATS = cleaned or ["png"]
    return FIG_FORMATS


def set_figure_dir(run_name: str, root: str | None = None):
    """Set the directory figures of this run go to and return its path."""
    global CURRENT_FIG_SAVE_DIR
    CURRENT_FIG_SAVE_DIR = os.path.join(root or FIG_SAVE_ROOT, f"{run_name}_{RUN_TAG}")
    return CURRENT_FIG_SAVE_DIR


def save_fig(name: str, dpi: int = 150):
    """Save the current matplotlib figure once per configured format.

    Returns the list of written paths.
    """
    if CURRENT_FIG_SAVE_DIR is None:
        raise ValueError("Call set_figure_dir() before saving figures.")
    os.makedirs(CURRENT_FIG_SAVE_DIR, exist_ok=True)
    base, _ = os.path.splitext(name.replace(' ', '_'))
    written = []
    for fmt in FIG_FORMATS:
        out_path = os.path.join(CURRENT_FIG_SAVE_DIR, f"{base}.{fmt}")
        try:
            plt.savefig(out_path, format=fmt, dpi=dpi, bbox_inches='tight')
        except (OSError, ValueError) as e:
            logger.warning("Saving figure %s failed: %s", out_path, e)
            continue
        logger.info("Saved figure %s", out_path)
        written.append(out_path)
    return written


__all__ = [
    'RUN_TAG', 'FIG_SAVE_ROOT', 'CURRENT_FIG_SAVE_DIR', 'FIG_FORMATS',
    'set_fig_formats', 'set_figure_dir', 'save_fig'
]
