"""Console reporting for verification runs."""

from .reporter import Reporter
from .summary import Band, classify, exit_code, render_summary, render_tips

__all__ = ["Band", "Reporter", "classify", "exit_code", "render_summary", "render_tips"]
