"""
Recognizers for the sentences of a webDiplomacy adjudication report.

Every recognizer takes the full text and a start offset and returns the
parsed value together with the offset just past what it consumed. When the
text at the offset does not match, it raises ParseError and the caller's
offset is left untouched, so alternatives can be tried in turn.
"""

import re
from typing import Callable, Tuple, TypeVar

from diplomacy_report.core.map import Coast, match_territory
from diplomacy_report.core.orders import (
    UnitType, TravelManner, Location, Unit, Order,
    Move, SupportMove, SupportHold, Convoy, Hold, Retreat, Build, Disband, Destroy
)
from diplomacy_report.parsing.errors import ParseError

T = TypeVar("T")
Recognizer = Callable[[str, int], Tuple[T, int]]

_WHITESPACE = re.compile(r"[ \t\r\n]*")
_COAST = re.compile(r" \((East|West|North|South) Coast\)")

UNIT_PREFIXES = (
    ("army at ", UnitType.ARMY),
    ("fleet at ", UnitType.FLEET),
    ("unit at ", UnitType.UNSPECIFIED),
)

# Result markers the export appends to an order; they are dropped
ANNOTATIONS = (" (fail)", " (dislodged)")


def skip_whitespace(text: str, pos: int) -> int:
    """Return the offset of the next non-whitespace character."""
    return _WHITESPACE.match(text, pos).end()


def expect(text: str, pos: int, literal: str) -> int:
    """Consume an exact literal or raise ParseError."""
    if not text.startswith(literal, pos):
        raise ParseError(text, pos, repr(literal))
    return pos + len(literal)


def consume(recognizer: Recognizer, text: str) -> Tuple[T, str]:
    """Run a recognizer from the start of text; return (value, remainder)."""
    value, pos = recognizer(text, 0)
    return value, text[pos:]


def parse_location(text: str, pos: int) -> Tuple[Location, int]:
    """Territory name with an optional ' (North Coast)' style qualifier."""
    territory = match_territory(text, pos)
    if territory is None:
        raise ParseError(text, pos, "a territory")
    pos += len(territory)

    coast = None
    match = _COAST.match(text, pos)
    if match:
        coast = Coast(match.group(1))
        pos = match.end()

    return Location(territory, coast), pos


def parse_unit(text: str, pos: int) -> Tuple[Unit, int]:
    """'army at X', 'fleet at X' or 'unit at X'."""
    for prefix, unit_type in UNIT_PREFIXES:
        if text.startswith(prefix, pos):
            location, end = parse_location(text, pos + len(prefix))
            return Unit(unit_type, location), end
    raise ParseError(text, pos, "a unit")


def _parse_build(text: str, pos: int) -> Tuple[Order, int]:
    pos = expect(text, pos, "Build ")
    unit, pos = parse_unit(text, pos)
    pos = expect(text, pos, ".")
    return Order(unit, Build()), pos


def _parse_destroy(text: str, pos: int) -> Tuple[Order, int]:
    pos = expect(text, pos, "Destroy the ")
    unit, pos = parse_unit(text, pos)
    pos = expect(text, pos, ".")
    return Order(unit, Destroy()), pos


def _hold_tail(text: str, pos: int) -> Tuple[Hold, int]:
    return Hold(), pos


def _disband_tail(text: str, pos: int) -> Tuple[Disband, int]:
    return Disband(), pos


def _move_tail(text: str, pos: int) -> Tuple[Move, int]:
    dst, pos = parse_location(text, pos)
    manner = TravelManner.LAND
    if text.startswith(" via convoy", pos):
        manner = TravelManner.CONVOY
        pos += len(" via convoy")
    pos = expect(text, pos, ".")
    return Move(dst, manner), pos


def _support_move_tail(text: str, pos: int) -> Tuple[SupportMove, int]:
    dst, pos = parse_location(text, pos)
    pos = expect(text, pos, " from ")
    src, pos = parse_location(text, pos)
    pos = expect(text, pos, ".")
    return SupportMove(src=src, dst=dst), pos


def _convoy_tail(text: str, pos: int) -> Tuple[Convoy, int]:
    dst, pos = parse_location(text, pos)
    pos = expect(text, pos, " from ")
    src, pos = parse_location(text, pos)
    pos = expect(text, pos, ".")
    return Convoy(src=src, dst=dst), pos


def _support_hold_tail(text: str, pos: int) -> Tuple[SupportHold, int]:
    loc, pos = parse_location(text, pos)
    pos = expect(text, pos, ".")
    return SupportHold(loc), pos


def _retreat_tail(text: str, pos: int) -> Tuple[Retreat, int]:
    dst, pos = parse_location(text, pos)
    pos = expect(text, pos, ".")
    return Retreat(dst), pos


# Verb phrases following "The <unit>". None is a prefix of another.
UNIT_VERBS = (
    (" hold.", _hold_tail),
    (" move to ", _move_tail),
    (" support move to ", _support_move_tail),
    (" support hold to ", _support_hold_tail),
    (" retreat to ", _retreat_tail),
    (" disband.", _disband_tail),
    (" convoy to ", _convoy_tail),
)


def _parse_unit_sentence(text: str, pos: int) -> Tuple[Order, int]:
    """'The <unit> <verb> ...' family of orders."""
    pos = expect(text, pos, "The ")
    unit, pos = parse_unit(text, pos)
    for verb, tail in UNIT_VERBS:
        if text.startswith(verb, pos):
            action, end = tail(text, pos + len(verb))
            return Order(unit, action), end
    raise ParseError(text, pos, "an order verb")


ORDER_SHAPES = (_parse_build, _parse_destroy, _parse_unit_sentence)


def skip_annotations(text: str, pos: int) -> int:
    """Drop any number of ' (fail)' / ' (dislodged)' markers."""
    while True:
        for marker in ANNOTATIONS:
            if text.startswith(marker, pos):
                pos += len(marker)
                break
        else:
            return pos


def parse_order(text: str, pos: int) -> Tuple[Order, int]:
    """One order sentence, including any trailing result markers."""
    furthest = None
    for shape in ORDER_SHAPES:
        try:
            order, end = shape(text, pos)
        except ParseError as e:
            if furthest is None or e.position > furthest.position:
                furthest = e
            continue
        return order, skip_annotations(text, end)

    if furthest is not None and furthest.position > pos:
        raise furthest
    raise ParseError(text, pos, "an order")
