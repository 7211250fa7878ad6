#!/usr/bin/env python3
"""Play Ataxx in the console against the search engine, with optional logging & replay."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

import numpy as np

from ataxx import AIPlayer, Board, GameResult, ManualPlayer, Move, PieceColor, SearchEngine
from ataxx.config import AtaxxConfig, load_config
from ataxx.evaluation import winner_message


def prompt_human_move(color: PieceColor, board: Board) -> Optional[Move]:
    print(board.render(legend=True))
    while True:
        try:
            raw = input(f"{color.name.capitalize()}: ").strip()
        except EOFError:
            print()
            return None
        if raw.lower() in {"q", "quit", "exit"}:
            return None
        try:
            return Move.parse(raw)
        except ValueError:
            print("Enter a move such as 'a1-b2', '-' to pass, or 'q' to quit.")


def make_player(kind: str, color: PieceColor, config: AtaxxConfig, rng: np.random.Generator):
    if kind == "ai":
        return AIPlayer(color, SearchEngine(config.search, rng=rng))
    return ManualPlayer(color, prompt_human_move)


def save_log(log: Dict, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(log, indent=2))
    print(f"Saved game log to {path}.")


def replay_logged_game(log_path: Path, *, verbose: bool = True) -> Dict[str, object]:
    data = json.loads(log_path.read_text())
    metadata = data.get("metadata", {})
    moves = data.get("moves", [])
    board = Board()
    for square in metadata.get("blocks", []):
        board.set_block(square)
    if verbose:
        print("Replaying logged game.")
        print(board.render(legend=True))
    for position, entry in enumerate(moves):
        if "move" not in entry:
            raise ValueError(f"Log entry {position} has no 'move' field.")
        move = Move.parse(entry["move"])
        board.make_move(move)
        if verbose:
            print(f"{entry.get('color', '?')} ({entry.get('actor', 'unknown')}) plays {move}")
            print(board.render(legend=True))
    result = board.result()
    summary = {
        "result": result.value,
        "moves": len(moves),
        "red": board.num_pieces(PieceColor.RED),
        "blue": board.num_pieces(PieceColor.BLUE),
        "board": board.render(),
    }
    if verbose:
        print("Replay finished.")
        print(f"Result: {summary['result']}")
    return summary


def play_interactive(config: AtaxxConfig, log_file: Optional[str] = None) -> GameResult:
    rng = np.random.default_rng(config.seed)
    board = Board()
    for square in config.blocks:
        board.set_block(square)

    players = {
        PieceColor.RED: make_player(config.red, PieceColor.RED, config, rng),
        PieceColor.BLUE: make_player(config.blue, PieceColor.BLUE, config, rng),
    }
    kinds = {PieceColor.RED: config.red, PieceColor.BLUE: config.blue}
    log_records: List[Dict] = []

    while not board.game_over():
        color = board.whose_move
        move = players[color].next_move(board)
        if move is None:
            print("Game abandoned.")
            break
        log_records.append(
            {
                "move_index": len(log_records),
                "actor": "human" if kinds[color] == "manual" else "ai",
                "color": color.name.lower(),
                "move": str(move),
            }
        )
        board.make_move(move)

    print("\nFinal board:")
    print(board.render(legend=True))
    result = board.result()
    if result != GameResult.ONGOING:
        print(winner_message(result))

    if log_file:
        metadata = {
            "red": config.red,
            "blue": config.blue,
            "max_depth": config.search.max_depth,
            "seed": config.seed,
            "blocks": list(config.blocks),
            "result": result.value,
        }
        save_log({"metadata": metadata, "moves": log_records}, Path(log_file))
    return result


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Play Ataxx in the console.")
    parser.add_argument("--config", type=str, default="configs/default.yaml")
    parser.add_argument("--red", choices=["ai", "manual"])
    parser.add_argument("--blue", choices=["ai", "manual"])
    parser.add_argument("--depth", type=int, help="Search depth for AI players")
    parser.add_argument("--seed", type=int)
    parser.add_argument("--block", action="append", default=None, help="Square to block (repeatable)")
    parser.add_argument("--log-file", type=str)
    parser.add_argument("--replay-log", type=str, help="Replay a logged game and exit")
    parser.add_argument("--replay-quiet", action="store_true")
    parser.add_argument("--log-level", type=str)
    args = parser.parse_args(argv)

    config = load_config(args.config)
    if args.red is not None:
        config.red = args.red
    if args.blue is not None:
        config.blue = args.blue
    if args.depth is not None:
        config.search.max_depth = args.depth
    if args.seed is not None:
        config.seed = args.seed
    if args.block:
        config.blocks = list(args.block)
    level = (args.log_level or config.log_level).upper()
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.replay_log:
            replay_logged_game(Path(args.replay_log), verbose=not args.replay_quiet)
        else:
            play_interactive(config, args.log_file)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
