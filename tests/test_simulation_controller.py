#!/usr/bin/env python3
"""
Self-play over every opening placement.

The full-depth session (both players searching 25 plies from all 24
openings) takes a long time in pure Python; set ISOLATION_SLOW_TESTS=1 to
run it.
"""

import os
import unittest

from isolation.simulation.config import AgentSettings, SelfPlayConfig
from isolation.simulation.simulation_controller import SimulationController


def _config(depth: int) -> SelfPlayConfig:
    settings = AgentSettings(algorithm="negamax", max_depth=depth)
    return SelfPlayConfig(player_one=settings, player_two=settings)


class TestSimulationController(unittest.TestCase):

    def assert_sessions_finish(self, results):
        self.assertEqual(len(results), 24)
        for result in results:
            self.assertEqual(result["reason"], "STANDARD")
            self.assertIn(result["winner"], ("1", "2"))
            self.assertNotEqual(result["winner"], result["loser"])
            self.assertLessEqual(result["plies"] + 2, 25)
            self.assertEqual(result["illegal_moves"], 0)

    def test_openings(self):
        openings = SimulationController().openings()
        self.assertEqual(len(openings), 24)
        self.assertEqual(openings[0], ((0, 0), (0, 1)))
        self.assertEqual(openings[-1], ((0, 0), (4, 4)))
        self.assertNotIn(((0, 0), (0, 0)), openings)
        self.assertEqual(len(set(second for _, second in openings)), 24)

    def test_openings_from_other_square(self):
        config = SelfPlayConfig(first_position=(2, 2))
        openings = SimulationController(config).openings()
        self.assertEqual(len(openings), 24)
        self.assertTrue(all(first == (2, 2) and second != (2, 2) for first, second in openings))

    def test_first_position_out_of_bounds(self):
        config = SelfPlayConfig(first_position=(5, 0))
        with self.assertRaises(ValueError):
            SimulationController(config).openings()

    def test_every_opening_finishes_shallow(self):
        controller = SimulationController(_config(1))
        results = controller.run_all()
        self.assert_sessions_finish(results)

        df, summary = controller.summarize(results)
        self.assertEqual(len(df), 24)
        self.assertEqual(summary["games"], 24)
        self.assertEqual(summary["player_one_wins"] + summary["player_two_wins"], 24)
        self.assertEqual(summary["unfinished"], 0)
        self.assertEqual(summary["illegal_moves"], 0)
        self.assertGreater(summary["mean_plies"], 0)

    def test_selected_openings_finish_at_depth_three(self):
        controller = SimulationController(_config(3))
        for opening in controller.openings()[::8]:
            result = controller.run_game(opening)
            self.assertEqual(result["reason"], "STANDARD")
            self.assertNotEqual(result["winner"], result["loser"])

    @unittest.skipUnless(os.environ.get("ISOLATION_SLOW_TESTS"), "full-depth self-play is slow")
    def test_every_opening_finishes_full_depth(self):
        self.assert_sessions_finish(SimulationController(_config(25)).run_all())

    def test_summarize_empty(self):
        df, summary = SimulationController.summarize([])
        self.assertTrue(df.empty)
        self.assertEqual(summary["games"], 0)


if __name__ == "__main__":
    unittest.main()
