from typing import Optional, Tuple

from isolation.game_logic import BOARD_SIZE, Player, pos_to_xy
from isolation.models.board_state import BoardState


class MirrorAgent:
    def get_move(self, board: BoardState, player: Player,
                 max_depth: Optional[int] = None) -> Tuple[int, int]:
        """
        Reflect the opponent's token through the centre of the board.

        For opponent coordinates (px, py) the move is (4 - px, 4 - py).
        max_depth is accepted for interface parity and ignored. The
        destination is not checked for legality and may already be occupied.
        """
        px, py = pos_to_xy(board.opponent_position(player))
        return BOARD_SIZE - 1 - px, BOARD_SIZE - 1 - py
