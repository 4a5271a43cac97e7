import argparse
import logging
import sys

from command_log import CommandLog, ReplayLoadError, ReplayPacer
from config import DEFAULT_CONFIG_PATH, load_config
from map_format import MapLoadError, read_definition
from puzzle_map import Map
from session import GameSession, replay_session

EXIT_WON = 0
EXIT_NOT_WON = 1
EXIT_LOAD_ERROR = 2


def build_parser():
    parser = argparse.ArgumentParser(
        description='Sokoban: push every block onto a goal, then reach the exit.'
    )
    parser.add_argument('map', nargs='?', default='-',
                        help='Map definition file ("-" or omitted reads stdin)')
    parser.add_argument('-c', '--config', type=str, default=None,
                        help=f'JSON configuration file (default: {DEFAULT_CONFIG_PATH} if present)')
    parser.add_argument('--cell-size', type=int, default=None,
                        help='Size of one cell in pixels (default: 32)')
    record_group = parser.add_mutually_exclusive_group()
    record_group.add_argument('--record', type=str, default=None, metavar='PATH',
                              help='Record issued commands to PATH')
    record_group.add_argument('--replay', type=str, default=None, metavar='PATH',
                              help='Replay the commands recorded in PATH')
    parser.add_argument('--headless', action='store_true',
                        help='Replay without opening a window (requires --replay)')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Log progress to stderr')
    return parser


def setup(args):
    """Load config, map, and command log.  Raises ValueError subclasses
    (MapLoadError, ReplayLoadError, config errors) on bad input."""
    if args.config is not None:
        config = load_config(args.config, required=True)
    else:
        config = load_config(DEFAULT_CONFIG_PATH)
    if args.cell_size is not None:
        if args.cell_size <= 0:
            raise ValueError(f"cell size must be positive, got {args.cell_size}")
        config.cell_size = args.cell_size

    if args.replay:
        command_log = CommandLog.replaying(args.replay)
    elif args.record:
        command_log = CommandLog.recording(args.record)
    else:
        command_log = CommandLog.inert()

    game_map = Map(read_definition(args.map), config.cell_size,
                   config.undo_level)
    return config, game_map, command_log


def report(result):
    if result.won:
        print("Congratulations, you won !")
    else:
        print(f"Session ended ({result.status.value}) with "
              f"{result.goals_left} goal(s) left")
    if result.log_saved is False:
        print("Warning: the command log could not be saved", file=sys.stderr)


def run(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.headless and not args.replay:
        parser.error('--headless requires --replay')

    try:
        config, game_map, command_log = setup(args)
    except (MapLoadError, ReplayLoadError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_LOAD_ERROR
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_LOAD_ERROR

    if args.headless:
        result = replay_session(game_map, command_log)
        print(game_map.dump())
    else:
        from game_runner import GameRunner
        pacer = None
        if command_log.is_replaying:
            pacer = ReplayPacer(config.replay_speed)
        session = GameSession(game_map, command_log)
        result = GameRunner(session, config, pacer).run()

    report(result)
    return EXIT_WON if result.won else EXIT_NOT_WON


if __name__ == "__main__":
    sys.exit(run())
