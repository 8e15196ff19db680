"""
Configuration settings for the self-play module.
"""

import os
import json
import logging
from typing import Literal, Tuple, Optional
from dataclasses import dataclass, field

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class AgentSettings(BaseModel):
    """Settings for the agent controlling one player."""
    algorithm: Literal["negamax", "mirror"] = "negamax"

    # Negamax specific settings
    max_depth: int = Field(25, ge=1, le=25, description="Search depth in plies for Negamax (1-25)")
    debug_mode: bool = Field(False, description="Log a per-node search trace at DEBUG level")


@dataclass
class SelfPlayConfig:
    """Configuration for a self-play session over every opening."""
    player_one: AgentSettings = field(default_factory=AgentSettings)
    player_two: AgentSettings = field(default_factory=AgentSettings)
    first_position: Tuple[int, int] = (0, 0)  # Player one's opening square
    max_plies: int = 50  # Stop a game that cannot finish (mirror moves may revisit cells)
    log_level: str = "INFO"


def get_config_path(config_path: str = "selfplay_config.json") -> str:
    """
    Get the absolute path to the configuration file.

    Args:
        config_path: Relative or absolute path to the configuration file

    Returns:
        Absolute path to the configuration file
    """
    if os.path.isabs(config_path):
        return config_path

    # Try relative to current directory
    if os.path.exists(config_path):
        return os.path.abspath(config_path)

    # Fall back to the simulation directory
    sim_dir = os.path.dirname(os.path.abspath(__file__))
    return os.path.join(sim_dir, config_path)


def load_config(config_path: Optional[str] = "selfplay_config.json") -> SelfPlayConfig:
    """
    Load configuration from a JSON file.

    Missing files yield the default configuration. Agent settings are
    validated by pydantic and raise ValidationError when out of range.

    Args:
        config_path: Path to the configuration file

    Returns:
        SelfPlayConfig object
    """
    if config_path is None:
        return SelfPlayConfig()

    config_path = get_config_path(config_path)
    if not os.path.exists(config_path):
        logger.warning(f"Config file {config_path} not found. Using default configuration.")
        return SelfPlayConfig()

    with open(config_path, 'r') as f:
        config_dict = json.load(f)

    config = SelfPlayConfig()
    if 'player_one' in config_dict:
        config.player_one = AgentSettings(**config_dict['player_one'])
    if 'player_two' in config_dict:
        config.player_two = AgentSettings(**config_dict['player_two'])
    if 'first_position' in config_dict:
        config.first_position = tuple(config_dict['first_position'])
    config.max_plies = config_dict.get('max_plies', config.max_plies)
    config.log_level = config_dict.get('log_level', config.log_level)

    return config
