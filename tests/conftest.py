"""
Shared report fixtures.
"""

import pytest

SAMPLE_REPORT = """\
Spring, 1901 Large map:

England:
Diplomacy
The fleet at London move to North Sea.
The army at Liverpool move to Yorkshire.

France:
Diplomacy
The army at Paris move to Burgundy. (fail)

Autumn, 1901 Large map:

England:
Diplomacy
The fleet at North Sea convoy to Norway from Yorkshire.
The army at Yorkshire move to Norway via convoy.
Unit-placement
Build fleet at London.

France:
Diplomacy
The army at Paris hold. (dislodged)
Retreats
The army at Paris retreat to Gascony.
Unit-placement
Destroy the army at Gascony.
"""

SAMPLE_RENDERED = "".join([
    "##############################\n",
    "# Diplomacy, Autumn 1901\n",
    "F North Sea convoys Yorkshire -> Norway\n",
    "A Yorkshire -> Norway by convoy\n",
    "\n",
    "A Paris hold\n",
    "\n",
    "##############################\n",
    "# Retreats, Autumn 1901\n",
    "A Paris -> Gascony\n",
    "\n",
    "##############################\n",
    "# Builds, Winter 1901\n",
    "build F London\n",
    "remove A Gascony\n",
    "\n\n\n",
    "##############################\n",
    "# Diplomacy, Spring 1901\n",
    "F London -> North Sea\n",
    "A Liverpool -> Yorkshire\n",
    "\n",
    "A Paris -> Burgundy\n",
    "\n",
    "##############################\n",
    "# Retreats, Spring 1901\n",
    "\n\n\n",
])


@pytest.fixture
def sample_report():
    return SAMPLE_REPORT


@pytest.fixture
def sample_rendered():
    return SAMPLE_RENDERED


@pytest.fixture
def report_file(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text(SAMPLE_REPORT, encoding="utf-8")
    return path
