from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .config.generation import GenerationSettings
from .config.room_settings import RoomSettings
from .core.directions import Turn
from .engine.session import GameSession
from .logging_config import configure_logging
from .view.map_view import legend, render_ascii


def _apply_moves(session: GameSession, moves: str) -> int:
    """Run F/B/L/R commands for the active player; returns successful moves."""
    moved = 0
    for cmd in moves.upper():
        if cmd == "F":
            moved += session.move_forward()
        elif cmd == "B":
            moved += session.move_backward()
        elif cmd == "L":
            session.turn(Turn.LEFT)
        elif cmd == "R":
            session.turn(Turn.RIGHT)
        elif not cmd.isspace():
            logging.getLogger(__name__).warning("Ignoring unknown move command %r", cmd)
    return moved


def main(argv: list[str] | None = None) -> int:
    defaults = GenerationSettings.env_overrides()
    parser = argparse.ArgumentParser(
        prog="zeldabread",
        description="Generate a ZeldaBread dungeon and print it as text",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--width", type=int, default=defaults.get("width", 21))
    parser.add_argument("--height", type=int, default=defaults.get("height", 21))
    parser.add_argument("--rooms", type=int, default=defaults.get("target_room_count", 50), help="Target room count")
    parser.add_argument("--seed", type=int, default=defaults.get("seed"))
    parser.add_argument("--players", nargs="+", default=["Adventurer"], help="Player names")
    parser.add_argument("--moves", default="", help="Commands for the first player: F, B, L, R")
    parser.add_argument("--settings", type=Path, default=None, help="Room settings YAML file")
    parser.add_argument("--full-map", action="store_true", help="Show the whole board")
    parser.add_argument("--legend", action="store_true", help="Print room counts per type")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    try:
        generation = GenerationSettings(
            width=args.width, height=args.height, target_room_count=args.rooms, seed=args.seed
        )
    except ValueError as exc:
        parser.error(str(exc))
    settings = RoomSettings.load(args.settings)
    session = GameSession.create(args.players, generation=generation, settings=settings)

    moved = _apply_moves(session, args.moves) if args.moves else 0
    if session.show_full_map != args.full_map:
        session.toggle_full_map()

    player = session.active_player
    print(f"{player.name} at {player.position} facing {player.facing.name}, energy {player.participant.energy}")
    if args.moves:
        print(f"{moved} move(s) succeeded")
    for line in render_ascii(session.board, player.state, session.show_full_map):
        print("|" + line + "|")
    if args.legend:
        for row in legend(session.board, player.state, session.settings):
            print(f"{row.label:<22} {row.color}  total={row.total:<3} visited={row.visited}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
