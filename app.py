"""
Pensum - Curriculum Progress Tracker

Streamlit application for tracking course completion across a curriculum.
Click a course to cycle its state (no cursada -> en curso -> aprobada),
reset it with the ↺ button.

Usage:
    streamlit run app.py
"""

import logging

import streamlit as st
import yaml

from pensum.config import load_settings
from pensum.schemas import CompletionState
from pensum.tracker import CourseStateController, ProgressStore
from pensum.utils import configure_logging, load_catalog
from pensum.viewer import (
    format_statistics,
    get_board_css,
    render_course_card,
    render_level_header,
    STATE_LABELS,
)


logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Configuration
# -----------------------------------------------------------------------------

st.set_page_config(
    page_title="Pensum",
    page_icon="🎓",
    layout="wide",
    initial_sidebar_state="expanded",
)


# -----------------------------------------------------------------------------
# Session State Initialization
# -----------------------------------------------------------------------------

def init_session_state():
    """Initialize session state variables."""
    if "settings" not in st.session_state:
        st.session_state.settings = load_settings()
        configure_logging(st.session_state.settings.log_level)

    settings = st.session_state.settings

    if "catalog" not in st.session_state:
        try:
            st.session_state.catalog = load_catalog(settings.catalog_path)
        except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
            logger.error(f"Could not load catalog: {e}")
            st.session_state.catalog = None
            st.session_state.catalog_error = str(e)

    if "controller" not in st.session_state and st.session_state.catalog:
        store = ProgressStore(settings.progress_db, storage_key=settings.storage_key)
        controller = CourseStateController(
            st.session_state.catalog,
            store,
            remaining_terms=settings.remaining_terms,
        )
        controller.on_state_change(notify_state_change)
        st.session_state.controller = controller

    if "last_change" not in st.session_state:
        st.session_state.last_change = None


def notify_state_change(course_id: str, state: CompletionState):
    """Remember the last change so the next run can show it."""
    st.session_state.last_change = (course_id, state)


# -----------------------------------------------------------------------------
# Sidebar: Statistics
# -----------------------------------------------------------------------------

def render_sidebar():
    """Render the sidebar with statistics and the remaining-terms input."""
    st.sidebar.title("🎓 Pensum")

    controller = st.session_state.get("controller")
    if not controller:
        return

    st.sidebar.caption(controller.catalog.name)

    terms = st.sidebar.number_input(
        "Semestres restantes",
        min_value=1,
        value=controller.statistics.remaining_terms,
        step=1,
    )
    if terms != controller.remaining_terms:
        controller.set_remaining_terms(terms)

    stats = controller.statistics
    shown = format_statistics(stats)

    st.sidebar.divider()
    st.sidebar.metric("Créditos aprobados", shown["approved_credits"])
    st.sidebar.metric("Créditos pendientes", shown["pending_credits"])
    st.sidebar.metric("Créditos en curso", shown["in_progress_credits"])
    st.sidebar.metric("Avance", shown["progress_percent"])
    st.sidebar.progress(min(max(stats.progress_percent / 100, 0.0), 1.0))
    st.sidebar.metric("Promedio por semestre", shown["average_credits_per_term"])

    st.sidebar.divider()
    if st.sidebar.button("Reiniciar todo", use_container_width=True):
        controller.reset_all()
        st.rerun()


# -----------------------------------------------------------------------------
# Main Content: Board
# -----------------------------------------------------------------------------

def render_board():
    """Render one column per level with a card per course."""
    controller = st.session_state.get("controller")
    if not controller:
        st.error("Catalog not found or invalid.")
        st.code(st.session_state.get("catalog_error", ""))
        return

    last_change = st.session_state.last_change
    if last_change:
        course_id, state = last_change
        st.toast(f"{course_id}: {STATE_LABELS[state]}")
        st.session_state.last_change = None

    st.markdown(get_board_css(), unsafe_allow_html=True)

    board = controller.get_board()
    columns = st.columns(len(board)) if board else []

    for column, level_column in zip(columns, board):
        with column:
            st.markdown(render_level_header(level_column), unsafe_allow_html=True)
            for card in level_column.cards:
                render_card(card)


def render_card(card):
    """Render a course card with its action buttons."""
    controller = st.session_state.controller
    course = card.course

    st.markdown(render_course_card(card), unsafe_allow_html=True)

    col1, col2, col3 = st.columns(3)
    with col1:
        if st.button("⟳", key=f"cycle_{course.id}", help="Cambiar estado", use_container_width=True):
            controller.cycle(course.id)
            st.rerun()
    with col2:
        if st.button(
            "↺",
            key=f"reset_{course.id}",
            help="Marcar como no cursada",
            disabled=card.state == CompletionState.NOT_TAKEN,
            use_container_width=True,
        ):
            controller.reset(course.id)
            st.rerun()
    with col3:
        if course.reference_url:
            st.link_button("📄", course.reference_url, help="Ver syllabus", use_container_width=True)
        elif course.has_reference:
            # not a URL the browser can open; show where the document lives
            st.caption(f"📄 {course.reference_document}")


# -----------------------------------------------------------------------------
# Main App
# -----------------------------------------------------------------------------

def main():
    """Main application entry point."""
    init_session_state()
    render_sidebar()
    render_board()


if __name__ == "__main__":
    main()
