"""
Pensum - curriculum progress tracker.

Subpackages:
- schemas: Pydantic models (courses, catalog, states, statistics)
- tracker: progress store, statistics engine, state controller
- viewer: HTML/CSS helpers for the Streamlit board
- utils: catalog loading and logging setup
"""

__version__ = "0.1.0"
