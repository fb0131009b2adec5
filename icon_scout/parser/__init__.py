"""icon_scout.parser: HTML helpers for page metadata and icon link discovery."""

from .html_parser import parse_metadata
from .icon_links import discover_candidates, is_icon_relation

__all__ = ["parse_metadata", "discover_candidates", "is_icon_relation"]
