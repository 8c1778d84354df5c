"""
Map catalog for the adjudication report parser.
Defines the powers, coasts, seasons and the fixed territory list of the
webDiplomacy large map export.
"""

from enum import Enum
from typing import Optional, Tuple


class Power(Enum):
    """The seven great powers, as spelled in the export."""
    AUSTRIA = "Austria"
    ENGLAND = "England"
    FRANCE = "France"
    GERMANY = "Germany"
    ITALY = "Italy"
    RUSSIA = "Russia"
    TURKEY = "Turkey"


class Coast(Enum):
    """Coast qualifiers for provinces with split coastlines."""
    EAST = "East"
    WEST = "West"
    NORTH = "North"
    SOUTH = "South"

    @property
    def abbreviation(self) -> str:
        """Short form used in canonical orders, e.g. 'NC'."""
        return f"{self.value[0]}C"


class Season(Enum):
    """Seasons that open a round in the export."""
    SPRING = "Spring"
    AUTUMN = "Autumn"

    def has_builds(self) -> bool:
        """Unit placement only follows the second season of the year."""
        return self == Season.AUTUMN


# Matched first-to-last, so no entry may be a prefix of a later one.
# Spelling follows the export ("Heligoland Blight" included).
TERRITORIES: Tuple[str, ...] = (
    # Supply centers
    "Ankara", "Belgium", "Berlin", "Brest", "Budapest", "Bulgaria",
    "Constantinople", "Denmark", "Edinburgh", "Greece", "Holland", "Kiel",
    "Liverpool", "London", "Marseilles", "Moscow", "Munich", "Naples",
    "Norway", "Paris", "Portugal", "Rome", "Rumania", "St. Petersburg",
    "Serbia", "Sevastopol", "Smyrna", "Spain", "Sweden", "Trieste", "Tunis",
    "Venice", "Vienna", "Warsaw",

    # Other land provinces
    "Clyde", "Yorkshire", "Wales", "Picardy", "Gascony", "Burgundy",
    "North Africa", "Ruhr", "Prussia", "Silesia", "Piedmont", "Tuscany",
    "Apulia", "Tyrolia", "Galicia", "Bohemia", "Finland", "Livonia",
    "Ukraine", "Albania", "Armenia", "Syria",

    # Sea provinces
    "North Atlantic Ocean", "Mid-Atlantic Ocean", "Norwegian Sea",
    "North Sea", "English Channel", "Irish Sea", "Heligoland Blight",
    "Skagerrak", "Baltic Sea", "Gulf of Bothnia", "Barents Sea",
    "Western Mediterranean", "Gulf of Lyons", "Tyrrhenian Sea",
    "Ionian Sea", "Adriatic Sea", "Aegean Sea", "Eastern Mediterranean",
    "Black Sea",
)


def match_territory(text: str, pos: int = 0) -> Optional[str]:
    """Return the first catalog territory that starts at text[pos], if any."""
    for name in TERRITORIES:
        if text.startswith(name, pos):
            return name
    return None


def is_territory(name: str) -> bool:
    """Check whether a name is one of the catalog territories."""
    return name in TERRITORIES
