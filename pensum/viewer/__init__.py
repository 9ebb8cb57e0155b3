"""
Pensum Viewer - Rendering components for the curriculum board.

This module provides:
- Course card and level column rendering
- Statistics display formatting
"""

from .board import (
    get_board_css,
    render_course_card,
    render_level_header,
    format_statistics,
    STATE_LABELS,
    STATE_COLORS,
    STATE_ICONS,
)

__all__ = [
    "get_board_css",
    "render_course_card",
    "render_level_header",
    "format_statistics",
    "STATE_LABELS",
    "STATE_COLORS",
    "STATE_ICONS",
]
