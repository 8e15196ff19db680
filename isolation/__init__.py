"""
Isolation AI

A negamax player with alpha-beta pruning and a reachability evaluation for
5x5 Isolation, plus a self-play harness that plays out every opening.
"""

from .game_logic import Cell, Player
from .models.board_state import BoardState
from .models.mirror_agent import MirrorAgent
from .models.negamax_agent import NegamaxAgent
from .models.scorer import ReachabilityScorer, Scorer

__all__ = ["Cell", "Player", "BoardState", "MirrorAgent", "NegamaxAgent", "ReachabilityScorer", "Scorer"]
