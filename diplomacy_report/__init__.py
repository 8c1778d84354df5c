"""
Diplomacy Report
Parses webDiplomacy adjudication reports and renders them in canonical order notation.
"""

from diplomacy_report.core.map import Power, Coast, Season, TERRITORIES
from diplomacy_report.core.orders import (
    UnitType, TravelManner, Location, Unit, Order,
    Move, SupportMove, SupportHold, Convoy, Hold, Retreat, Build, Disband, Destroy
)
from diplomacy_report.core.game import Phase, PowerRound, Round, Game
from diplomacy_report.parsing import (
    ParseError, GrammarMismatchError, TrailingContentError,
    parse_location, parse_unit, parse_order, parse_game, parse_game_prefix
)
from diplomacy_report.rendering import render_order, render_game
from diplomacy_report.io.yaml_writer import ReportWriter

__version__ = "1.0.0"
__all__ = [
    'Power', 'Coast', 'Season', 'TERRITORIES',
    'UnitType', 'TravelManner', 'Location', 'Unit', 'Order',
    'Move', 'SupportMove', 'SupportHold', 'Convoy', 'Hold', 'Retreat',
    'Build', 'Disband', 'Destroy',
    'Phase', 'PowerRound', 'Round', 'Game',
    'ParseError', 'GrammarMismatchError', 'TrailingContentError',
    'parse_location', 'parse_unit', 'parse_order', 'parse_game', 'parse_game_prefix',
    'render_order', 'render_game',
    'ReportWriter'
]
