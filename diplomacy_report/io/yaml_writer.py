"""
Utility for writing a parsed report to YAML.
"""

import yaml
import logging
from typing import Optional

from diplomacy_report.core.orders import Order
from diplomacy_report.core.game import Phase, PowerRound, Round, Game
from diplomacy_report.rendering.text_renderer import render_unit, render_location, render_order

logger = logging.getLogger(__name__)

# Order.to_dict keys holding a location, and the action attribute behind each
LOCATION_FIELDS = {
    'source': 'src',
    'destination': 'dst',
    'location': 'loc',
}


class ReportWriter:
    """Converts a parsed Game to a YAML document."""

    @staticmethod
    def game_to_yaml_dict(game: Game, game_id: Optional[str] = None) -> dict:
        """
        Convert a Game to a YAML-compatible dictionary.

        Args:
            game: Parsed report
            game_id: Optional identifier recorded at the top of the document

        Returns:
            Dictionary with rounds listed newest first
        """
        yaml_dict = {}
        if game_id:
            yaml_dict['game_id'] = game_id
        yaml_dict['rounds'] = [
            ReportWriter._round_to_dict(rnd) for rnd in game.rounds_newest_first()
        ]
        return yaml_dict

    @staticmethod
    def _round_to_dict(rnd: Round) -> dict:
        return {
            'phase': rnd.name,
            'powers': [ReportWriter._power_round_to_dict(pr) for pr in rnd.power_rounds]
        }

    @staticmethod
    def _power_round_to_dict(power_round: PowerRound) -> dict:
        power_dict = {'power': power_round.power.value}
        for name, phase in power_round.phases():
            power_dict[name] = ReportWriter._phase_to_list(phase)
        return power_dict

    @staticmethod
    def _phase_to_list(phase: Phase) -> list:
        return [ReportWriter._order_to_dict(order) for order in phase]

    @staticmethod
    def _order_to_dict(order: Order) -> dict:
        """Order.to_dict with units and locations written in canonical form."""
        order_dict = order.to_dict()
        order_dict['unit'] = render_unit(order.unit)
        for key, attr in LOCATION_FIELDS.items():
            if key in order_dict:
                order_dict[key] = render_location(getattr(order.action, attr))
        order_dict['line'] = render_order(order)
        return order_dict

    @staticmethod
    def dump(game: Game, game_id: Optional[str] = None) -> str:
        """Serialize a Game to a YAML string."""
        yaml_dict = ReportWriter.game_to_yaml_dict(game, game_id)
        return yaml.dump(yaml_dict, default_flow_style=False, sort_keys=False)

    @staticmethod
    def save_to_yaml(game: Game, filepath: str, game_id: Optional[str] = None) -> None:
        """
        Save a Game to a YAML file.

        Args:
            game: Parsed report
            filepath: Path to save YAML file
            game_id: Optional identifier recorded in the file
        """
        yaml_dict = ReportWriter.game_to_yaml_dict(game, game_id)

        with open(filepath, 'w') as f:
            yaml.dump(yaml_dict, f, default_flow_style=False, sort_keys=False)

        logger.info(f"Saved {len(game.rounds)} rounds to {filepath}")
