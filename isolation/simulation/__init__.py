"""
Isolation Self-Play Package

This package provides tools for playing every opening placement out
between configurable agents and summarizing the results.
"""

from .game_runner import GameRunner
from .simulation_controller import SimulationController

__all__ = ["GameRunner", "SimulationController"]
