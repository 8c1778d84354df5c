"""
Order model for the adjudication report.
Units, locations and the closed set of actions an order line can carry.
"""

from enum import Enum
from typing import Optional, Union
from dataclasses import dataclass

from diplomacy_report.core.map import Coast, is_territory


class UnitType(Enum):
    """Type of unit named by an order line."""
    ARMY = "Army"
    FLEET = "Fleet"
    UNSPECIFIED = "Unit"  # the export only said "unit at ..."


class TravelManner(Enum):
    """How a moving unit travels."""
    LAND = "land"
    CONVOY = "convoy"


@dataclass(frozen=True)
class Location:
    """A territory plus an optional coast qualifier."""
    territory: str
    coast: Optional[Coast] = None

    def __post_init__(self):
        if not is_territory(self.territory):
            raise ValueError(f"Unknown territory: {self.territory!r}")

    def to_dict(self) -> dict:
        return {
            "territory": self.territory,
            "coast": self.coast.value if self.coast else None
        }


@dataclass(frozen=True)
class Unit:
    """A unit as it appears in an order line."""
    unit_type: UnitType
    location: Location

    def to_dict(self) -> dict:
        return {
            "unit_type": self.unit_type.value,
            "location": self.location.to_dict()
        }


@dataclass(frozen=True)
class Move:
    """Move to an adjacent province, or across water when convoyed."""
    dst: Location
    manner: TravelManner = TravelManner.LAND

    @property
    def via_convoy(self) -> bool:
        return self.manner == TravelManner.CONVOY


@dataclass(frozen=True)
class SupportMove:
    """Support the move of the unit at src into dst."""
    src: Location
    dst: Location


@dataclass(frozen=True)
class SupportHold:
    """Support the unit holding at loc."""
    loc: Location


@dataclass(frozen=True)
class Convoy:
    """Carry the army at src to dst."""
    src: Location
    dst: Location


@dataclass(frozen=True)
class Hold:
    pass


@dataclass(frozen=True)
class Retreat:
    dst: Location


@dataclass(frozen=True)
class Build:
    pass


@dataclass(frozen=True)
class Disband:
    pass


@dataclass(frozen=True)
class Destroy:
    pass


Action = Union[Move, SupportMove, SupportHold, Convoy, Hold, Retreat, Build, Disband, Destroy]

ACTION_TYPES = (Move, SupportMove, SupportHold, Convoy, Hold, Retreat, Build, Disband, Destroy)

# Key used for each action in serialized output
ACTION_NAMES = {
    Move: "move",
    SupportMove: "support_move",
    SupportHold: "support_hold",
    Convoy: "convoy",
    Hold: "hold",
    Retreat: "retreat",
    Build: "build",
    Disband: "disband",
    Destroy: "destroy",
}


@dataclass(frozen=True)
class Order:
    """One order line: a unit and what it was told to do."""
    unit: Unit
    action: Action

    def __post_init__(self):
        if not isinstance(self.action, ACTION_TYPES):
            raise TypeError(f"Unknown action type: {type(self.action).__name__}")

    @property
    def action_name(self) -> str:
        return ACTION_NAMES[type(self.action)]

    def to_dict(self) -> dict:
        """Convert order to dictionary for serialization."""
        data = {
            "unit": self.unit.to_dict(),
            "action": self.action_name
        }
        action = self.action
        if isinstance(action, Move):
            data["destination"] = action.dst.to_dict()
            data["via_convoy"] = action.via_convoy
        elif isinstance(action, (SupportMove, Convoy)):
            data["source"] = action.src.to_dict()
            data["destination"] = action.dst.to_dict()
        elif isinstance(action, SupportHold):
            data["location"] = action.loc.to_dict()
        elif isinstance(action, Retreat):
            data["destination"] = action.dst.to_dict()
        return data
