"""
Core data model: map catalog, orders and the parsed report document.
"""

from diplomacy_report.core.map import Power, Coast, Season, TERRITORIES
from diplomacy_report.core.orders import (
    UnitType, TravelManner, Location, Unit, Order, Action,
    Move, SupportMove, SupportHold, Convoy, Hold, Retreat, Build, Disband, Destroy
)
from diplomacy_report.core.game import Phase, PowerRound, Round, Game

__all__ = [
    'Power', 'Coast', 'Season', 'TERRITORIES',
    'UnitType', 'TravelManner', 'Location', 'Unit', 'Order', 'Action',
    'Move', 'SupportMove', 'SupportHold', 'Convoy', 'Hold', 'Retreat',
    'Build', 'Disband', 'Destroy',
    'Phase', 'PowerRound', 'Round', 'Game'
]
