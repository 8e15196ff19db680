#!/usr/bin/env python3
"""
Run an Isolation self-play session.

Player one opens on a fixed square (0,0 by default) and player two on each of
the other 24 squares in turn; every opening is played out to the end and a
summary of the results is printed.

The default depth of 25 searches every game to the end, which in pure Python
can take hours per opening; pass --depth 3 for a quick session.

Usage:
    isolation-selfplay [--config selfplay_config.json] [--depth 25]
                       [--player-one negamax] [--player-two mirror]
"""

import argparse
import logging
import sys

from pydantic import ValidationError

from isolation.simulation.config import AgentSettings, load_config
from isolation.simulation.simulation_controller import SimulationController

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Isolation against itself from every opening.")
    parser.add_argument("--config", default=None, help="Path to a JSON configuration file")
    parser.add_argument("--depth", type=int, default=None, help="Search depth for negamax players (1-25). "
                        "The default of 25 searches to the end of the game and can take hours; "
                        "use --depth 3 for a quick session")
    parser.add_argument("--player-one", choices=["negamax", "mirror"], default=None,
                        help="Algorithm for player one")
    parser.add_argument("--player-two", choices=["negamax", "mirror"], default=None,
                        help="Algorithm for player two")
    parser.add_argument("--first", type=int, nargs=2, metavar=("X", "Y"), default=None,
                        help="Opening square of player one")
    parser.add_argument("--max-plies", type=int, default=None, help="Stop unfinished games after this many moves")
    parser.add_argument("--log-level", default=None, help="Logging level (DEBUG, INFO, WARNING, ...)")
    return parser.parse_args(argv)


def _override(settings: AgentSettings, algorithm, depth) -> AgentSettings:
    values = settings.model_dump()
    if algorithm is not None:
        values["algorithm"] = algorithm
    if depth is not None:
        values["max_depth"] = depth
    return AgentSettings(**values)


def main(argv=None) -> int:
    args = parse_args(argv)

    try:
        config = load_config(args.config)
        config.player_one = _override(config.player_one, args.player_one, args.depth)
        config.player_two = _override(config.player_two, args.player_two, args.depth)
        if args.first is not None:
            config.first_position = tuple(args.first)
        if args.max_plies is not None:
            config.max_plies = args.max_plies
        if args.log_level is not None:
            config.log_level = args.log_level.upper()

        logging.basicConfig(
            level=config.log_level,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        logger.info(f"Player one: {config.player_one.model_dump()}")
        logger.info(f"Player two: {config.player_two.model_dump()}")

        controller = SimulationController(config)
        results = controller.run_all()
    except (ValueError, ValidationError) as e:
        logging.basicConfig(format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        logger.error(f"Invalid self-play configuration: {e}")
        return 2

    df, summary = controller.summarize(results)
    print(df[["opening", "winner", "reason", "plies", "illegal_moves", "leaf_evaluations"]].to_string(index=False))
    print()
    print(f"Games: {summary['games']}")
    print(f"Player 1 wins: {summary['player_one_wins']}")
    print(f"Player 2 wins: {summary['player_two_wins']}")
    print(f"Unfinished: {summary['unfinished']}")
    print(f"Mean plies: {summary['mean_plies']:.1f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
