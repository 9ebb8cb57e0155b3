"""
Board renderer - Course cards, level columns and statistics display.

Provides:
- CSS for the curriculum board
- Course card rendering colored by completion state
- Display formatting of statistics (one decimal place)
"""

import html

from pensum.schemas import CompletionState, Statistics
from pensum.tracker import CourseCard, LevelColumn


STATE_LABELS = {
    CompletionState.NOT_TAKEN: "No cursada",
    CompletionState.IN_PROGRESS: "En curso",
    CompletionState.APPROVED: "Aprobada",
}

STATE_COLORS = {
    CompletionState.NOT_TAKEN: "#9E9E9E",
    CompletionState.IN_PROGRESS: "#F9A825",
    CompletionState.APPROVED: "#388E3C",
}

STATE_ICONS = {
    CompletionState.NOT_TAKEN: "○",
    CompletionState.IN_PROGRESS: "◐",
    CompletionState.APPROVED: "✓",
}


def get_board_css() -> str:
    """Get CSS styles for the curriculum board."""
    rules = ["""
    <style>
    .level-header {
        font-size: 1.05em;
        font-weight: 600;
        color: #1565C0;
        text-align: center;
        padding-bottom: 0.3em;
        margin-bottom: 0.5em;
        border-bottom: 2px solid #e3f2fd;
    }
    .level-meta {
        font-size: 0.8em;
        color: #888;
        text-align: center;
        margin-bottom: 0.8em;
    }
    .subject-card {
        background: white;
        border: 1px solid #e0e0e0;
        border-left-width: 5px;
        border-radius: 8px;
        padding: 0.6em 0.8em;
        margin: 0.4em 0;
        box-shadow: 0 1px 3px rgba(0,0,0,0.05);
    }
    .card-header {
        font-size: 0.75em;
        color: #888;
        display: flex;
        justify-content: space-between;
    }
    .subject-name {
        font-weight: 600;
        color: #333;
        margin: 0.3em 0;
        line-height: 1.3;
    }
    .card-footer {
        display: flex;
        justify-content: space-between;
        align-items: center;
        font-size: 0.8em;
    }
    .credits-badge {
        background: #e3f2fd;
        color: #1565C0;
        padding: 0.1em 0.5em;
        border-radius: 4px;
    }
    .state-label {
        font-weight: 600;
    }"""]
    for state, color in STATE_COLORS.items():
        rules.append(f"""
    .state-{state.value} {{
        border-left-color: {color};
    }}
    .state-{state.value} .state-label {{
        color: {color};
    }}""")
    rules.append("\n    </style>\n    ")
    return ''.join(rules)


def render_course_card(card: CourseCard) -> str:
    """
    Render a course card.

    Args:
        card: CourseCard with course and current state

    Returns:
        HTML string for the card
    """
    course = card.course
    state = card.state

    parts = [f'<div class="subject-card state-{state.value}" data-id="{html.escape(course.id)}">']

    parts.append('<div class="card-header">')
    parts.append(f'<span>Cod: {html.escape(course.id)}</span>')
    parts.append(f'<span>{STATE_ICONS[state]}</span>')
    parts.append('</div>')

    parts.append(f'<div class="subject-name" title="{html.escape(course.name)}">{html.escape(course.name)}</div>')

    parts.append('<div class="card-footer">')
    parts.append(f'<span class="credits-badge">{course.credits} Cr</span>')
    parts.append(f'<span class="state-label">{STATE_LABELS[state]}</span>')
    parts.append('</div>')

    parts.append('</div>')
    return ''.join(parts)


def render_level_header(column: LevelColumn) -> str:
    """Render the header of a level column."""
    return (
        f'<div class="level-header">Nivel {column.level}</div>'
        f'<div class="level-meta">{column.approved_count}/{column.total_count} aprobadas'
        f' · {column.credits} Cr</div>'
    )


def format_statistics(stats: Statistics) -> dict[str, str]:
    """
    Format statistics for display.

    Credit totals are shown as integers, percentage and average with one
    decimal place.
    """
    return {
        "approved_credits": str(stats.approved_credits),
        "pending_credits": str(stats.pending_credits),
        "in_progress_credits": str(stats.in_progress_credits),
        "progress_percent": f"{stats.progress_percent:.1f}%",
        "average_credits_per_term": f"{stats.average_credits_per_term:.1f}",
    }
