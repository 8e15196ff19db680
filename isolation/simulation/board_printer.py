from typing import List

from isolation.game_logic import BOARD_SIZE, Cell, Player
from isolation.models.board_state import BoardState


def format_board(board: BoardState) -> List[str]:
    """
    Format the board for display, one string per row.

    Empty cells are blank, each player's current token shows its digit and
    every other trail cell shows 'X', e.g. '| 1 |   | X |   | 2 | '.
    """
    rows = []
    for x in range(BOARD_SIZE):
        row = "| "
        for y in range(BOARD_SIZE):
            row += board.cell_view(x, y) + " | "
        rows.append(row)
    return rows


def format_possible_moves(board: BoardState, player: Player) -> List[str]:
    """Format the board with player's legal destinations marked '*'."""
    destinations = set(board.legal_moves(player))
    grid = board.to_grid()

    rows = []
    for x in range(BOARD_SIZE):
        row = "| "
        for y in range(BOARD_SIZE):
            if (x, y) in destinations:
                symbol = "*"
            elif grid[x, y] == Cell.EMPTY:
                symbol = " "
            else:
                symbol = board.cell_view(x, y)
            row += symbol + " | "
        rows.append(row)
    return rows
