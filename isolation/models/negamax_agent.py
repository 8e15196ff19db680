import logging
import time
from typing import Optional, Tuple

from isolation.game_logic import (
    INF,
    LOSS_VALUE,
    Player,
    get_possible_moves,
    opponent,
    player_label,
    pos_to_xy,
)
from isolation.models.board_state import BoardState
from isolation.models.scorer import ReachabilityScorer, Scorer

logger = logging.getLogger(__name__)


class NegamaxAgent:
    """
    Negamax agent with alpha-beta pruning for Isolation.

    Moves are tried in generation order (direction, then distance) with no
    reordering, and the first of several equally scored moves wins, so the
    choice is deterministic for a given board. Cutoffs are fail-soft: a node
    that prunes returns its running best score, not beta.
    """

    def __init__(self, scorer: Optional[Scorer] = None, max_depth: int = 25, debug_mode: bool = False):
        self.scorer = scorer if scorer is not None else ReachabilityScorer()
        self.max_depth = max_depth
        self.search_depth = max_depth  # Depth limit of the search in progress
        self.debug_mode = debug_mode  # Per-node trace at DEBUG level
        self.board = None
        self.best_move = None
        self.best_score = None
        self.leaf_count = 0  # Static evaluations performed by the last search

    def get_move(self, board: BoardState, player: Player,
                 max_depth: Optional[int] = None) -> Optional[Tuple[int, int]]:
        """
        Search for the best destination of player's token.

        Args:
            board: Board to search; it is restored before returning
            player: Side to move
            max_depth: Plies to look ahead, defaults to the agent's max_depth

        Returns:
            (x, y) of the chosen destination, or None when player has
            already lost
        """
        self.board = board
        self.search_depth = max_depth if max_depth is not None else self.max_depth
        self.leaf_count = 0
        self.best_move = None

        start_time = time.time()
        self.best_score = self._negamax(player, board.position(player), board.opponent_position(player),
                                        0, -INF, INF, record_move=True)
        elapsed = time.time() - start_time

        if self.best_move is None:
            logger.warning(f"Player {player_label(player)} has no move to search from")
            return None

        x, y = pos_to_xy(self.best_move)
        logger.info(f"Player {player_label(player)} -> ({x}, {y}) score={self.best_score} "
                    f"depth={self.search_depth} leaves={self.leaf_count} [{elapsed:.2f}s]")
        return x, y

    def _negamax(self, mover: Player, mover_pos: int, opponent_pos: int, depth: int,
                 alpha: int, beta: int, record_move: bool = False) -> int:
        """Score the position for mover; only the root call records best_move."""
        board = self.board
        if board.has_lost(mover_pos):
            if self.debug_mode:
                self._trace(depth, "LOST", LOSS_VALUE + depth)
            # Later losses score higher, so a doomed side delays and a winner hurries
            return LOSS_VALUE + depth

        if depth == self.search_depth:
            self.leaf_count += 1
            score = self.scorer.get_score(board, mover)
            if self.debug_mode:
                self._trace(depth, "SCORE", score)
            return score

        best_score = -INF
        rival = opponent(mover)
        for target in get_possible_moves(board.cells, mover_pos):
            if self.debug_mode:
                x, y = pos_to_xy(target)
                logger.debug(f"{'  ' * depth}{depth} MOVE {x},{y}")

            previous = board.push_move(target, mover)
            score = -self._negamax(rival, opponent_pos, target, depth + 1, -beta, -alpha)
            board.pop_move(target, mover, previous)

            if score > best_score:
                best_score = score
                if record_move:
                    self.best_move = target
            alpha = max(alpha, score)
            if alpha >= beta:
                break

        if self.debug_mode:
            self._trace(depth, "BEST", best_score)
        return best_score

    def _trace(self, depth: int, action: str, score: int) -> None:
        logger.debug(f"{'  ' * depth}{depth} {action} {score}")
