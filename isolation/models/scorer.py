from collections import deque
from typing import Dict, Protocol, Tuple

from isolation.game_logic import (
    BUFFER_CELLS,
    MOVES,
    NO_POSITION,
    SCORE_PER_CELL,
    Cell,
    Player,
    opponent,
    pos_to_xy,
)
from isolation.models.board_state import BoardState


class Scorer(Protocol):
    """Static evaluation used by the search at its depth cutoff."""

    def get_score(self, board: BoardState, player: Player) -> int:
        ...


class ReachabilityScorer:
    """
    Area-control evaluation for Isolation.

    For each player, a breadth-first expansion over queen moves measures how
    many empty cells the token can still reach and how many moves it takes
    to get there. The score of a side is reach(player) - reach(opponent),
    so it is antisymmetric between the two players.
    """

    def get_score(self, board: BoardState, player: Player) -> int:
        return self.reach(board, player) - self.reach(board, opponent(player))

    def reach(self, board: BoardState, player: Player) -> int:
        """Compute visited_cells * SCORE_PER_CELL - total_distance for player."""
        steps = self.distances(board, player)
        return len(steps) * SCORE_PER_CELL - sum(steps.values())

    def distances(self, board: BoardState, player: Player) -> Dict[Tuple[int, int], int]:
        """
        Map every square player's token can reach to its distance in moves.

        The starting cell counts as visited at distance 0. From each dequeued
        cell, every empty cell along a queen ray is discovered at one more
        move; a ray stops at the first non-empty cell or the first cell that
        already has a distance.
        """
        start = board.position(player)
        if start == NO_POSITION:
            return {}

        cells = board.cells
        steps = [-1] * BUFFER_CELLS
        steps[start] = 0
        queue = deque([start])
        visited = {}

        while queue:
            pos = queue.popleft()
            visited[pos_to_xy(pos)] = steps[pos]
            step = steps[pos] + 1
            for move in MOVES:
                target = pos + move
                while cells[target] == Cell.EMPTY and steps[target] == -1:
                    steps[target] = step
                    queue.append(target)
                    target += move

        return visited
