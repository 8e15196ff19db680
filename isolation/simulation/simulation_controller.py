import logging
from typing import Dict, List, Tuple

import numpy as np
import pandas as pd

from isolation.game_logic import BOARD_SIZE, is_in_bounds
from .config import SelfPlayConfig
from .game_runner import GameRunner, Opening

logger = logging.getLogger(__name__)


class SimulationController:
    """
    Runs one self-play game per opening placement and summarizes the results.
    """

    def __init__(self, config: SelfPlayConfig = None):
        """
        Initialize the simulation controller.

        Args:
            config: Self-play configuration, defaults to SelfPlayConfig()
        """
        self.config = config if config is not None else SelfPlayConfig()

    def openings(self) -> List[Opening]:
        """
        Enumerate the openings: player one on the configured square and
        player two on each of the other 24 squares, in row-major order.
        """
        first = tuple(self.config.first_position)
        if not is_in_bounds(*first):
            raise ValueError(f"First position {first} out of bounds")
        return [(first, second) for second in np.ndindex(BOARD_SIZE, BOARD_SIZE) if second != first]

    def run_game(self, opening: Opening) -> Dict:
        runner = GameRunner(self.config.player_one, self.config.player_two,
                            max_plies=self.config.max_plies)
        return runner.run_game(opening)

    def run_all(self) -> List[Dict]:
        """
        Run a game for every opening.

        Returns:
            List of game result dictionaries, in opening order
        """
        results = []
        all_openings = self.openings()
        for i, opening in enumerate(all_openings, 1):
            logger.info(f"Game {i}/{len(all_openings)}: opening {opening}")
            result = self.run_game(opening)
            logger.info(f"Game {i} finished: winner={result['winner']} "
                        f"reason={result['reason']} plies={result['plies']}")
            results.append(result)
        return results

    @staticmethod
    def summarize(results: List[Dict]) -> Tuple[pd.DataFrame, Dict]:
        """
        Build a results table and aggregate statistics.

        Returns:
            (DataFrame with one row per game, summary dictionary)
        """
        df = pd.DataFrame(results)
        if df.empty:
            return df, {"games": 0, "player_one_wins": 0, "player_two_wins": 0,
                        "unfinished": 0, "mean_plies": 0.0, "illegal_moves": 0}

        finished = df[df['reason'] == 'STANDARD']
        summary = {
            "games": len(df),
            "player_one_wins": int((finished['winner'] == '1').sum()),
            "player_two_wins": int((finished['winner'] == '2').sum()),
            "unfinished": int((df['reason'] != 'STANDARD').sum()),
            "mean_plies": float(df['plies'].mean()),
            "illegal_moves": int(df['illegal_moves'].sum()),
        }
        return df, summary
