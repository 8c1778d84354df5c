"""
Rendering of parsed reports back to text.
"""

from diplomacy_report.rendering.text_renderer import (
    render_location, render_unit, render_order, render_phase, render_round, render_game
)

__all__ = [
    'render_location', 'render_unit', 'render_order',
    'render_phase', 'render_round', 'render_game'
]
