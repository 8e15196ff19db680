from typing import Dict, Tuple, Any, Optional
import logging
import time
import uuid

from isolation.game_logic import Player, is_in_bounds, opponent, player_label
from isolation.models.board_state import BoardState
from isolation.models.mirror_agent import MirrorAgent
from isolation.models.negamax_agent import NegamaxAgent
from isolation.simulation.board_printer import format_board
from isolation.simulation.config import AgentSettings

logger = logging.getLogger(__name__)

Opening = Tuple[Tuple[int, int], Tuple[int, int]]


class GameRunner:
    """
    Runs a single self-play game from a given opening and captures the results.
    """

    def __init__(self, player_one_settings: AgentSettings, player_two_settings: AgentSettings,
                 max_plies: int = 50):
        """
        Initialize a game runner with agent settings.

        Args:
            player_one_settings: Settings for the agent playing player one
            player_two_settings: Settings for the agent playing player two
            max_plies: Number of moves after which an unfinished game is stopped
        """
        self.settings = {
            Player.ONE: player_one_settings,
            Player.TWO: player_two_settings,
        }
        self.max_plies = max_plies
        self.game_id = str(uuid.uuid4())
        self.move_history = []

    def _create_agent(self, settings: AgentSettings) -> Any:
        if settings.algorithm == 'negamax':
            return NegamaxAgent(max_depth=settings.max_depth, debug_mode=settings.debug_mode)
        elif settings.algorithm == 'mirror':
            return MirrorAgent()
        else:
            raise ValueError(f"Unknown algorithm: {settings.algorithm}")

    @staticmethod
    def _validate_opening(opening: Opening) -> None:
        first, second = opening
        for x, y in (first, second):
            if not is_in_bounds(x, y):
                raise ValueError(f"Opening square ({x}, {y}) out of bounds")
        if tuple(first) == tuple(second):
            raise ValueError(f"Both tokens cannot open on ({first[0]}, {first[1]})")

    def run_game(self, opening: Opening) -> Dict:
        """
        Run a complete game and return statistics.

        Args:
            opening: ((x, y) of player one, (x, y) of player two)

        Returns:
            Dict containing game statistics
        """
        self._validate_opening(opening)
        (x1, y1), (x2, y2) = opening

        board = BoardState()
        board.play(x1, y1, Player.ONE)
        board.play(x2, y2, Player.TWO)
        self.move_history = [f"p{x1}{y1}", f"p{x2}{y2}"]

        agents = {player: self._create_agent(settings) for player, settings in self.settings.items()}
        move_times = {Player.ONE: [], Player.TWO: []}

        start_time = time.time()
        plies = 0
        illegal_moves = 0
        leaf_evaluations = 0
        winner: Optional[Player] = None
        loser: Optional[Player] = None
        reason = "STANDARD"

        player = Player.ONE
        while True:
            if board.has_lost(board.position(player)):
                loser = player
                winner = opponent(player)
                logger.info(f"Player:{player_label(player)} Lost.")
                break
            if plies >= self.max_plies:
                reason = "PLY_LIMIT"
                logger.warning(f"Game {self.game_id} stopped after {plies} plies without a loser")
                break

            settings = self.settings[player]
            agent = agents[player]

            move_start = time.time()
            x, y = agent.get_move(board, player, settings.max_depth)
            move_times[player].append(time.time() - move_start)

            if isinstance(agent, NegamaxAgent):
                leaf_evaluations += agent.leaf_count
            if not board.is_legal(x, y):
                illegal_moves += 1
                logger.warning(f"Player {player_label(player)} ({settings.algorithm}) "
                               f"moves onto occupied square ({x}, {y})")

            board.play(x, y, player)
            self.move_history.append(f"m{x}{y}")
            plies += 1

            logger.info(f"Moved {player_label(player)} M: {x}, {y}")
            for row in format_board(board):
                logger.info(row)

            player = opponent(player)

        p1_times = move_times[Player.ONE]
        p2_times = move_times[Player.TWO]
        return {
            "game_id": self.game_id,
            "opening": f"{x1}{y1}-{x2}{y2}",
            "player_one_algorithm": self.settings[Player.ONE].algorithm,
            "player_two_algorithm": self.settings[Player.TWO].algorithm,
            "winner": player_label(winner) if winner is not None else None,
            "loser": player_label(loser) if loser is not None else None,
            "reason": reason,
            "plies": plies,
            "illegal_moves": illegal_moves,
            "game_duration": time.time() - start_time,
            "avg_player_one_move_time": sum(p1_times) / len(p1_times) if p1_times else 0,
            "avg_player_two_move_time": sum(p2_times) / len(p2_times) if p2_times else 0,
            "leaf_evaluations": leaf_evaluations,
            "move_history": ",".join(self.move_history),
        }
