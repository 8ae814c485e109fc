"""
Tictactoe CLI - Command-line entry point.

Usage:
    tictactoe                          3x3 board, 2 players, 1 human
    tictactoe --size 5 --players 3     bigger board, more players
    tictactoe --humans 0 --seed 7      watch computers play
"""

import argparse
import sys

from loguru import logger


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Tictactoe - N-player game on a square grid",
        prog="tictactoe",
    )
    parser.add_argument("--size", type=int, default=3, help="Edge length of the board")
    parser.add_argument("--players", type=int, default=2, help="Number of players")
    parser.add_argument("--humans", type=int, default=1, help="Number of human players")
    parser.add_argument("--seed", type=int, default=None, help="Seed for computer players")
    parser.add_argument("--max-turns", type=int, default=None, help="Stop after this many moves")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )

    args = parser.parse_args(argv)

    logger.remove()
    logger.add(sys.stderr, level=args.log_level)

    cmd_play(args)


def cmd_play(args):
    """Build the game and run it to the end."""
    from .engine_core import GameConfig, Game, InvalidConfig

    try:
        config = GameConfig.build(
            size=args.size,
            total_players=args.players,
            human_players=args.humans,
            seed=args.seed,
        )
    except InvalidConfig as e:
        print(f"Error: {e.detail}")
        sys.exit(1)

    game = Game.create(config)

    try:
        result = game.loop(max_turns=args.max_turns)
    except (EOFError, KeyboardInterrupt):
        print("\nGame aborted")
        sys.exit(1)

    print(f"\n{game.board}\n")
    if game.is_over:
        print(f"Board full after {result.moves} moves")
    else:
        print(f"Stopped after {result.moves} moves, player {game.current_player.next} is next")


if __name__ == "__main__":
    main()
