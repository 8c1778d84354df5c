"""
Document model for a parsed adjudication report.
A Game holds Rounds, a Round holds one PowerRound per power, and a
PowerRound holds up to three Phases of Orders.
"""

from typing import Iterator, List, Optional, Tuple
from dataclasses import dataclass

from diplomacy_report.core.map import Power, Season
from diplomacy_report.core.orders import Order


@dataclass(frozen=True)
class Phase:
    """Orders given by one power in one sub-phase, in report order."""
    orders: Tuple[Order, ...]

    def __post_init__(self):
        if not self.orders:
            raise ValueError("A phase must contain at least one order")

    def __len__(self) -> int:
        return len(self.orders)

    def __iter__(self) -> Iterator[Order]:
        return iter(self.orders)


@dataclass(frozen=True)
class PowerRound:
    """One power's section of a round."""
    power: Power
    diplomacy: Optional[Phase] = None
    retreat: Optional[Phase] = None
    build: Optional[Phase] = None

    def phases(self) -> List[Tuple[str, Phase]]:
        """Present phases as (name, phase) pairs, in report order."""
        named = [
            ("diplomacy", self.diplomacy),
            ("retreat", self.retreat),
            ("build", self.build),
        ]
        return [(name, phase) for name, phase in named if phase is not None]


@dataclass(frozen=True)
class Round:
    """A season of a given year and the orders of every power in it."""
    season: Season
    year: str
    power_rounds: Tuple[PowerRound, ...]

    def is_build_season(self) -> bool:
        return self.season.has_builds()

    def powers(self) -> List[Power]:
        """Powers in the order their sections appear (duplicates kept)."""
        return [pr.power for pr in self.power_rounds]

    @property
    def name(self) -> str:
        return f"{self.season.value} {self.year}"


@dataclass(frozen=True)
class Game:
    """A whole report. Rounds are stored in the order they were parsed."""
    rounds: Tuple[Round, ...]

    def rounds_newest_first(self) -> List[Round]:
        return list(reversed(self.rounds))

    def order_count(self) -> int:
        return sum(
            len(phase)
            for rnd in self.rounds
            for pr in rnd.power_rounds
            for _, phase in pr.phases()
        )
