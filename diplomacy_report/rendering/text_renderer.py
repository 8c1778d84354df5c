"""
Canonical text rendering of a parsed adjudication report.

webDiplomacy lists the newest round first, so the game is rendered
newest round first as well.
"""

import logging
from typing import List, Optional

from diplomacy_report.core.map import Season
from diplomacy_report.core.orders import (
    UnitType, TravelManner, Location, Unit, Order,
    Move, SupportMove, SupportHold, Convoy, Hold, Retreat, Build, Disband, Destroy
)
from diplomacy_report.core.game import Phase, Round, Game

logger = logging.getLogger(__name__)

BANNER = "#" * 30

UNIT_TYPE_PREFIXES = {
    UnitType.FLEET: "F ",
    UnitType.ARMY: "A ",
    UnitType.UNSPECIFIED: "",
}


def render_location(location: Location) -> str:
    if location.coast is None:
        return location.territory
    return f"{location.territory}/{location.coast.abbreviation}"


def render_unit(unit: Unit) -> str:
    return f"{UNIT_TYPE_PREFIXES[unit.unit_type]}{render_location(unit.location)}"


def render_order(order: Order) -> str:
    """Render one order as a single canonical line (no newline)."""
    unit = render_unit(order.unit)
    action = order.action

    if isinstance(action, Hold):
        return f"{unit} hold"
    elif isinstance(action, Build):
        return f"build {unit}"
    elif isinstance(action, Disband):
        return f"{unit} disbands"
    elif isinstance(action, Destroy):
        return f"remove {unit}"
    elif isinstance(action, Move):
        convoy_str = " by convoy" if action.manner == TravelManner.CONVOY else ""
        return f"{unit} -> {render_location(action.dst)}{convoy_str}"
    elif isinstance(action, Retreat):
        return f"{unit} -> {render_location(action.dst)}"
    elif isinstance(action, SupportMove):
        return f"{unit} S {render_location(action.src)} -> {render_location(action.dst)}"
    elif isinstance(action, Convoy):
        return f"{unit} convoys {render_location(action.src)} -> {render_location(action.dst)}"
    elif isinstance(action, SupportHold):
        return f"{unit} S {render_location(action.loc)} hold"

    raise TypeError(f"Cannot render action type: {type(action).__name__}")


def render_phase(phase: Phase) -> str:
    """Every order on its own line, each line newline-terminated."""
    return "".join(f"{render_order(order)}\n" for order in phase)


def _banner(title: str) -> List[str]:
    return [BANNER + "\n", f"# {title}\n"]


def _phase_blocks(phases: List[Optional[Phase]], separator: str = "") -> List[str]:
    return [render_phase(phase) + separator for phase in phases if phase is not None]


def render_round(rnd: Round) -> str:
    """Diplomacy and retreat sections, plus winter builds after Autumn."""
    parts = _banner(f"Diplomacy, {rnd.name}")
    parts += _phase_blocks([pr.diplomacy for pr in rnd.power_rounds], separator="\n")

    parts += _banner(f"Retreats, {rnd.name}")
    parts += _phase_blocks([pr.retreat for pr in rnd.power_rounds])

    if rnd.season == Season.AUTUMN:
        parts.append("\n")
        parts += _banner(f"Builds, Winter {rnd.year}")
        parts += _phase_blocks([pr.build for pr in rnd.power_rounds])
    else:
        skipped = [pr.power.value for pr in rnd.power_rounds if pr.build is not None]
        if skipped:
            logger.debug(f"{rnd.name}: not rendering unit placement for {', '.join(skipped)}")

    parts.append("\n\n\n")
    return "".join(parts)


def render_game(game: Game) -> str:
    """Render the whole report, newest round first."""
    return "".join(render_round(rnd) for rnd in game.rounds_newest_first())
