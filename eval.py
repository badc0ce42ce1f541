#!/usr/bin/env python3
"""
Evaluate the decision engine's difficulty tiers, or play against it.

Usage:
    python eval.py                              # All tier matchups, 200 games each
    python eval.py --games 50 --seed 1
    python eval.py --play --difficulty hard     # Interactive game, then replay
    python eval.py --oracle-model policy.pt     # HARD consults a saved torch policy
"""

import sys
import json
import logging
import argparse
from dataclasses import asdict
from itertools import product
from pathlib import Path

import torch
from tqdm.auto import tqdm

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from ttt_engine import (
    ArenaConfig,
    Difficulty,
    EngineConfig,
    GameMode,
    GameSession,
    PolicyNetOracle,
    Status,
    O,
    X,
    legal_moves,
    opponent,
    render,
    run_matchup,
)
from ttt_engine.arena import rates


def load_oracle(path):
    """Load a pickled torch policy module as a HARD-tier oracle."""
    model_path = Path(path)
    if not model_path.exists():
        print(f"Oracle model not found: {model_path}")
        return None
    print(f"Loading oracle model: {model_path}")
    model = torch.load(model_path, map_location="cpu", weights_only=False)
    return PolicyNetOracle(model)


def play_interactive(session: GameSession):
    """Play a game against the engine, then step through its replay."""
    human = opponent(session.ai_mark)
    print("\n=== Interactive Game ===")
    print(f"You are {'X' if human == X else 'O'} ({session.difficulty.value} engine)")
    print("Enter moves as numbers 0-8:")
    print(" 0 | 1 | 2 ")
    print("---+---+---")
    print(" 3 | 4 | 5 ")
    print("---+---+---")
    print(" 6 | 7 | 8 ")
    print()

    while True:
        outcome = session.outcome
        if outcome.is_terminal:
            print(render(session.board))
            if outcome.status is Status.DRAW:
                print("\nDraw!")
            elif outcome.winner == human:
                print(f"\nYou win! (line {outcome.line})")
            else:
                print(f"\nEngine wins! (line {outcome.line})")
            break

        print(render(session.board))
        print()

        if session.is_ai_turn:
            action = session.ai_move()
            print(f"Engine plays: {action}")
        else:
            moves = legal_moves(session.board)
            try:
                action = int(input(f"Your move ({moves}): "))
                if action not in moves:
                    print("Invalid move, try again")
                    continue
            except (ValueError, KeyboardInterrupt, EOFError):
                print("\nGame aborted")
                return
            session.play(action)
        print()

    session.reset()
    print("\n=== Replay ===")
    for k in range(len(session.history.last_completed) + 1):
        print(f"\nAfter {k} moves:")
        print(render(session.replay(k)))


def main():
    parser = argparse.ArgumentParser(description="Evaluate TicTacToe decision engine")
    parser.add_argument("--games", type=int, default=200, help="Games per matchup")
    parser.add_argument("--seed", type=int, default=0, help="Random seed")
    parser.add_argument("--play", action="store_true", help="Play interactive game")
    parser.add_argument("--difficulty", type=str, default="normal", help="Engine tier for --play")
    parser.add_argument("--first", action="store_true", help="Engine plays X in --play")
    parser.add_argument("--oracle-model", type=str, default=None, help="Torch policy module for HARD")
    parser.add_argument("--oracle-timeout", type=float, default=2.0, help="Oracle deadline (s)")
    parser.add_argument("--save", type=str, default=None, help="Write results JSON here")
    parser.add_argument("--no-progress", action="store_true", help="Hide progress bars")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    oracle = load_oracle(args.oracle_model) if args.oracle_model else None

    # Interactive play
    if args.play:
        config = EngineConfig(
            oracle_timeout=args.oracle_timeout,
            seed=args.seed,
            ai_mark=X if args.first else O,
        )
        session = GameSession(GameMode.PVE, Difficulty.parse(args.difficulty), oracle, config)
        play_interactive(session)
        return

    # Evaluation
    config = ArenaConfig(
        games=args.games,
        seed=args.seed,
        oracle_timeout=args.oracle_timeout,
        progress=not args.no_progress,
    )
    print(f"\n=== Evaluation ({config.games} games per matchup) ===")

    results = {}
    for x_tier, o_tier in product(Difficulty, repeat=2):
        scores = run_matchup(x_tier, o_tier, config, oracle)
        xw, d, ow = rates(scores)
        tqdm.write(f"X {x_tier.value:>6} vs O {o_tier.value:<6}: "
                   f"{xw:.2%} X / {d:.2%} D / {ow:.2%} O")
        results[f"{x_tier.value}_vs_{o_tier.value}"] = asdict(scores)

    if args.save:
        out_path = Path(args.save)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        with open(out_path, "w") as f:
            json.dump({"config": asdict(config), "results": results}, f, indent=2)
        print(f"✓ Results saved to {out_path}")


if __name__ == "__main__":
    main()
