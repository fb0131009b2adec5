# File: icon_scout/report/__init__.py
"""icon_scout.report: многоразмерные PNG и отчёты (JSON и HTML) для CLI."""

from .encoder import encode_sizes
from .html_report import render_html
from .json_report import render_json

__all__ = ["encode_sizes", "render_json", "render_html"]
