from typing import List, Tuple

import numpy as np

from isolation.game_logic import (
    BOARD_SIZE,
    BUFFER_CELLS,
    BUFFER_WIDTH,
    MOVES,
    NO_POSITION,
    Cell,
    Player,
    get_possible_moves,
    player_cell,
    player_label,
    pos_to_xy,
    xy_to_pos,
)


class BoardState:
    """
    A class representing an Isolation board.

    The 5x5 playable grid sits inside a 7x7 flat buffer whose outer ring is
    Cell.BORDER, so neighbour probes from any playable cell never need bounds
    checks. Every cell a token has stood on stays occupied for the rest of
    the game; only the search lifts its own speculative marks (see
    push_move/pop_move).
    """

    def __init__(self):
        self.cells: List[Cell] = [Cell.EMPTY] * BUFFER_CELLS
        for i in range(BUFFER_WIDTH):
            self.cells[i] = Cell.BORDER
            self.cells[i * BUFFER_WIDTH] = Cell.BORDER
            self.cells[(BUFFER_WIDTH - 1) * BUFFER_WIDTH + i] = Cell.BORDER
            self.cells[i * BUFFER_WIDTH + BUFFER_WIDTH - 1] = Cell.BORDER

        # Current token positions, NO_POSITION until the first placement
        self.p1 = NO_POSITION
        self.p2 = NO_POSITION

    def clone(self) -> 'BoardState':
        """Create a copy of the board that shares no mutable state."""
        new_board = BoardState()
        new_board.cells = list(self.cells)
        new_board.p1 = self.p1
        new_board.p2 = self.p2
        return new_board

    def position(self, player: Player) -> int:
        return self.p1 if player == Player.ONE else self.p2

    def opponent_position(self, player: Player) -> int:
        return self.p2 if player == Player.ONE else self.p1

    def cell(self, x: int, y: int) -> Cell:
        return self.cells[xy_to_pos(x, y)]

    def is_legal(self, x: int, y: int) -> bool:
        return self.cells[xy_to_pos(x, y)] == Cell.EMPTY

    def has_lost(self, pos: int) -> bool:
        """
        Check whether a token at pos is boxed in.

        A token has lost when none of its 8 neighbours is empty. The
        NO_POSITION sentinel (token not yet placed) never loses.
        """
        if pos == NO_POSITION:
            return False
        cells = self.cells
        return not any(cells[pos + step] == Cell.EMPTY for step in MOVES)

    def play(self, x: int, y: int, player: Player) -> None:
        """
        Commit a move for player.

        The destination is not checked: callers pass a destination produced
        by an agent. The previous position stays occupied.
        """
        pos = xy_to_pos(x, y)
        self.cells[pos] = player_cell(player)
        self._set_position(player, pos)

    def push_move(self, pos: int, player: Player) -> int:
        """Speculatively move player to pos. Returns the position to restore."""
        previous = self.position(player)
        self.cells[pos] = player_cell(player)
        self._set_position(player, pos)
        return previous

    def pop_move(self, pos: int, player: Player, previous: int) -> None:
        """Undo a push_move."""
        self.cells[pos] = Cell.EMPTY
        self._set_position(player, previous)

    def _set_position(self, player: Player, pos: int) -> None:
        if player == Player.ONE:
            self.p1 = pos
        else:
            self.p2 = pos

    def legal_moves(self, player: Player) -> List[Tuple[int, int]]:
        """All destinations of player's token as (x, y), in generation order."""
        return [pos_to_xy(pos) for pos in get_possible_moves(self.cells, self.position(player))]

    def cell_view(self, x: int, y: int) -> str:
        """
        Render a single playable cell.

        Returns ' ' for an empty cell, a digit for a cell holding a current
        token, and 'X' for any other occupied cell. The digit comes from the
        cell code, so when both tokens share a square (a mirror move onto the
        opponent) it names the player who marked it last.
        """
        pos = xy_to_pos(x, y)
        cell = self.cells[pos]
        if cell == Cell.EMPTY:
            return ' '
        if pos == self.p1 or pos == self.p2:
            return player_label(Player(int(cell)))
        return 'X'

    def to_grid(self) -> np.ndarray:
        """The playable 5x5 area as an array of cell codes, indexed [x, y]."""
        buffer = np.array(self.cells, dtype=np.int8).reshape(BUFFER_WIDTH, BUFFER_WIDTH)
        return buffer[1:BOARD_SIZE + 1, 1:BOARD_SIZE + 1].copy()
