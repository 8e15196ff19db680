import random
import unittest

from isolation.game_logic import Cell, Player, xy_to_pos
from isolation.models.board_state import BoardState
from isolation.models.scorer import ReachabilityScorer
from tests.board_helpers import string_board_to_board_state


class TestReachabilityScorer(unittest.TestCase):
    """Breadth-first reachability evaluation."""

    def setUp(self):
        self.scorer = ReachabilityScorer()

    def test_lone_corner_token_reaches_whole_board(self):
        # 12 cells one move away, the other 12 two moves away
        board = BoardState()
        board.play(0, 0, Player.ONE)
        self.assertEqual(self.scorer.reach(board, Player.ONE), 25 * 16 - (12 * 1 + 12 * 2))
        self.assertEqual(self.scorer.get_score(board, Player.ONE), 364)
        self.assertEqual(self.scorer.get_score(board, Player.TWO), -364)

    def test_unplaced_player_reaches_nothing(self):
        board = BoardState()
        self.assertEqual(self.scorer.reach(board, Player.ONE), 0)
        self.assertEqual(self.scorer.get_score(board, Player.ONE), 0)

    def test_isolated_token_counts_only_itself(self):
        board = string_board_to_board_state([
            "1X___",
            "XX___",
            "_____",
            "_____",
            "_____"
        ])
        self.assertEqual(self.scorer.reach(board, Player.ONE), 16)

    def test_walled_region_limits_reach(self):
        board = string_board_to_board_state([
            "1_X__",
            "XXX__",
            "_____",
            "_____",
            "_____"
        ])
        # Start cell at distance 0 plus (0, 1) at distance 1
        self.assertEqual(self.scorer.reach(board, Player.ONE), 2 * 16 - 1)
        self.assertEqual(self.scorer.get_score(board, Player.ONE), 31)

    def test_ray_stops_at_visited_cell(self):
        board = string_board_to_board_state([
            "1____",
            "XX_2X",
            "_____",
            "X____",
            "_X___"
        ])
        # (0, 2) looks down through (1, 2), already found from (0, 1), so
        # (2, 2) and (3, 2) wait for the next layer
        self.assertEqual(self.scorer.distances(board, Player.ONE), {
            (0, 0): 0,
            (0, 1): 1, (0, 2): 1, (0, 3): 1, (0, 4): 1,
            (1, 2): 2, (2, 3): 2, (3, 4): 2,
            (2, 2): 3, (3, 2): 3, (4, 2): 3, (2, 1): 3,
            (2, 4): 3, (3, 3): 3, (4, 3): 3, (4, 4): 3,
            (3, 1): 4, (4, 0): 4, (2, 0): 4,
        })
        self.assertEqual(self.scorer.reach(board, Player.ONE), 19 * 16 - 46)
        self.assertEqual(self.scorer.reach(board, Player.ONE), 258)

    def test_unplaced_player_has_no_distances(self):
        self.assertEqual(self.scorer.distances(BoardState(), Player.TWO), {})

    def test_opponent_reach_is_subtracted(self):
        board = string_board_to_board_state([
            "1X___",
            "XX___",
            "_____",
            "_____",
            "____2"
        ])
        reach_two = self.scorer.reach(board, Player.TWO)
        self.assertGreater(reach_two, 16)
        self.assertEqual(self.scorer.get_score(board, Player.ONE), 16 - reach_two)

    def test_score_is_antisymmetric(self):
        rng = random.Random(11)
        for _ in range(100):
            board = BoardState()
            for x in range(5):
                for y in range(5):
                    if rng.random() < 0.4:
                        board.cells[xy_to_pos(x, y)] = Cell.PLAYER_ONE
            squares = rng.sample([(x, y) for x in range(5) for y in range(5)], 2)
            board.play(*squares[0], Player.ONE)
            board.play(*squares[1], Player.TWO)
            self.assertEqual(self.scorer.get_score(board, Player.ONE),
                             -self.scorer.get_score(board, Player.TWO))

    def test_scoring_leaves_board_untouched(self):
        board = string_board_to_board_state([
            "1____",
            "_X___",
            "__X__",
            "___X_",
            "____2"
        ])
        cells_before = list(board.cells)
        self.scorer.get_score(board, Player.ONE)
        self.assertEqual(board.cells, cells_before)


if __name__ == "__main__":
    unittest.main()
