from enum import IntEnum
from typing import List, Sequence, Tuple

BOARD_SIZE = 5
BUFFER_WIDTH = BOARD_SIZE + 2
BUFFER_CELLS = BUFFER_WIDTH * BUFFER_WIDTH

# Index of a border corner; stands for "token not placed yet".
NO_POSITION = 0

# Queen directions in generation order: E, W, S, N, SW, NE, SE, NW.
MOVES = (1, -1, 7, -7, 6, -6, 8, -8)

LOSS_VALUE = -1000
WIN_VALUE = 1000
INF = 1000000
SCORE_PER_CELL = 16


class Cell(IntEnum):
    EMPTY = 0
    PLAYER_ONE = 1
    PLAYER_TWO = 2
    BORDER = 5


class Player(IntEnum):
    ONE = 1
    TWO = 2


def opponent(player: Player) -> Player:
    return Player.TWO if player == Player.ONE else Player.ONE


def player_cell(player: Player) -> Cell:
    """The cell code a player's token leaves behind."""
    return Cell.PLAYER_ONE if player == Player.ONE else Cell.PLAYER_TWO


def player_label(player: Player) -> str:
    return '1' if player == Player.ONE else '2'


def is_in_bounds(x: int, y: int) -> bool:
    """Check if coordinates are within the 5x5 board bounds."""
    return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE


def xy_to_pos(x: int, y: int) -> int:
    """Convert 0-indexed (row, column) coordinates to a buffer index."""
    return x * BUFFER_WIDTH + y + BUFFER_WIDTH + 1


def pos_to_xy(pos: int) -> Tuple[int, int]:
    """Convert a buffer index back to 0-indexed (row, column) coordinates."""
    offset = pos - BUFFER_WIDTH - 1
    return offset // BUFFER_WIDTH, offset % BUFFER_WIDTH


def get_possible_moves(cells: Sequence[int], pos: int) -> List[int]:
    """
    Get every destination a queen slide can reach from pos.

    Destinations come in generation order: direction by direction following
    MOVES, and within a direction by increasing distance. A direction ends at
    the first cell that is not empty (another trail cell or the border).

    Args:
        cells: The flat board buffer
        pos: Buffer index of the moving token

    Returns:
        List of buffer indices
    """
    moves = []
    if pos == NO_POSITION:
        return moves
    for step in MOVES:
        target = pos + step
        while cells[target] == Cell.EMPTY:
            moves.append(target)
            target += step
    return moves
