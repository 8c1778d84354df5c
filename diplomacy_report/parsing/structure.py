"""
Structural parsing of an adjudication report.
Groups order sentences into phases, phases into power sections, power
sections into seasonal rounds and rounds into a game.
"""

import re
import logging
from typing import Optional, Tuple

from diplomacy_report.core.map import Power, Season
from diplomacy_report.core.game import Phase, PowerRound, Round, Game
from diplomacy_report.parsing.errors import ParseError, GrammarMismatchError, TrailingContentError
from diplomacy_report.parsing.grammar import skip_whitespace, expect, parse_order

logger = logging.getLogger(__name__)

_YEAR = re.compile(r"[0-9]+")

# Sub-phase labels of a power section, in the order they appear
PHASE_LABELS = (
    ("diplomacy", "Diplomacy"),
    ("retreat", "Retreats"),
    ("build", "Unit-placement"),
)


def parse_phase(text: str, pos: int) -> Tuple[Phase, int]:
    """One or more orders separated by whitespace."""
    orders = []
    while True:
        try:
            order, end = parse_order(text, skip_whitespace(text, pos))
        except ParseError as e:
            failure = e
            break
        orders.append(order)
        pos = skip_whitespace(text, end)

    if not orders:
        raise failure
    return Phase(tuple(orders)), pos


def _parse_power_name(text: str, pos: int) -> Tuple[Power, int]:
    for power in Power:
        if text.startswith(power.value, pos):
            return power, pos + len(power.value)
    raise ParseError(text, pos, "a power name")


def _parse_labelled_phase(text: str, pos: int, label: str) -> Tuple[Optional[Phase], int]:
    """An optional 'Label' block; once the label is read its orders are required."""
    start = skip_whitespace(text, pos)
    if not text.startswith(label, start):
        return None, pos
    phase, pos = parse_phase(text, skip_whitespace(text, start + len(label)))
    return phase, skip_whitespace(text, pos)


def parse_power_round(text: str, pos: int) -> Tuple[PowerRound, int]:
    """'<Power>:' followed by its Diplomacy, Retreats and Unit-placement blocks."""
    pos = skip_whitespace(text, pos)
    power, pos = _parse_power_name(text, pos)
    pos = expect(text, pos, ":")

    phases = {}
    for field_name, label in PHASE_LABELS:
        phases[field_name], pos = _parse_labelled_phase(text, pos, label)

    return PowerRound(power, **phases), pos


def parse_round_header(text: str, pos: int) -> Tuple[Tuple[Season, str], int]:
    """'<Season>, <Year> Large map:'."""
    for candidate in Season:
        if text.startswith(candidate.value, pos):
            season = candidate
            pos += len(candidate.value)
            break
    else:
        raise ParseError(text, pos, "a season")

    pos = expect(text, pos, ", ")
    match = _YEAR.match(text, pos)
    if not match:
        raise ParseError(text, pos, "a year")
    pos = expect(text, match.end(), " Large map:")
    return (season, match.group(0)), pos


def parse_round(text: str, pos: int) -> Tuple[Round, int]:
    """A round header followed by at least one power section."""
    rnd, pos, _ = _parse_round(text, pos)
    return rnd, pos


def _parse_round(text: str, pos: int) -> Tuple[Round, int, ParseError]:
    """Parse a round and also return the failure that ended its power sections."""
    (season, year), pos = parse_round_header(text, skip_whitespace(text, pos))
    pos = skip_whitespace(text, pos)

    power_rounds = []
    while True:
        try:
            power_round, end = parse_power_round(text, skip_whitespace(text, pos))
        except ParseError as e:
            if not power_rounds:
                raise
            stop = e
            break
        power_rounds.append(power_round)
        pos = skip_whitespace(text, end)

    rnd = Round(season, year, tuple(power_rounds))
    powers = rnd.powers()
    duplicates = sorted({p.value for p in powers if powers.count(p) > 1})
    if duplicates:
        logger.warning(f"{rnd.name}: more than one section for {', '.join(duplicates)}")
    logger.debug(f"Parsed {rnd.name} with {len(power_rounds)} power section(s)")
    return rnd, pos, stop


def parse_game_prefix(text: str) -> Tuple[Game, str]:
    """
    Parse as many rounds as possible from the start of text.

    Returns:
        The parsed Game and the unconsumed remainder (possibly empty)

    Raises:
        GrammarMismatchError: If not even one round could be parsed
    """
    game, pos, _ = _parse_rounds(text)
    return game, text[pos:]


def parse_game(text: str, strict: bool = True) -> Game:
    """
    Parse a complete adjudication report.

    Args:
        text: The whole report
        strict: If True, unparsed text after the last round is an error;
            otherwise it is logged and ignored

    Raises:
        GrammarMismatchError: If no round could be parsed at all
        TrailingContentError: If strict and input remains after the last round
    """
    game, pos, last_error = _parse_rounds(text)
    if pos < len(text):
        error = TrailingContentError(text, pos, game, cause=last_error)
        if strict:
            raise error
        logger.warning(f"Ignoring {error}")
    logger.info(f"Parsed {len(game.rounds)} round(s) with {game.order_count()} order(s)")
    return game


def _parse_rounds(text: str) -> Tuple[Game, int, Optional[ParseError]]:
    rounds = []
    pos = 0
    stop = None
    while True:
        try:
            rnd, end, round_stop = _parse_round(text, pos)
        except ParseError as e:
            if not rounds:
                raise GrammarMismatchError(text, e.position, e.expected) from e
            last_error = e
            if stop is not None and stop.position > e.position:
                last_error = stop
            break
        rounds.append(rnd)
        stop = round_stop
        pos = skip_whitespace(text, end)
        if pos == len(text):
            last_error = None
            break
    return Game(tuple(rounds)), pos, last_error
