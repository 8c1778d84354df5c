"""
Parsers for webDiplomacy adjudication reports.
"""

from diplomacy_report.parsing.errors import ParseError, GrammarMismatchError, TrailingContentError
from diplomacy_report.parsing.grammar import consume, parse_location, parse_unit, parse_order
from diplomacy_report.parsing.structure import (
    parse_phase, parse_power_round, parse_round, parse_game, parse_game_prefix
)

__all__ = [
    'ParseError', 'GrammarMismatchError', 'TrailingContentError',
    'consume', 'parse_location', 'parse_unit', 'parse_order',
    'parse_phase', 'parse_power_round', 'parse_round', 'parse_game', 'parse_game_prefix'
]
