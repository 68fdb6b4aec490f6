"""Report rendering."""

from .report import render_report, render_tree

__all__ = ["render_report", "render_tree"]
