"""Exporters package — convert analysis results to output formats."""
from bizpulse.exporters.markdown import render_markdown

__all__ = ["render_markdown"]
