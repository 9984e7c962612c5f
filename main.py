#!/usr/bin/env python3
"""CLI entry point for the tennis game scorer.

Usage:
    python main.py score 1 1 2       Print the final score for the given points
    python main.py replay 1 2 2 1    Print the score after every point
    python main.py simulate [prob]   Simulate a game (prob = chance P1 wins a point)
    python main.py analyze           Generate score charts
    python main.py test              Run all tests

Points are given as 1/2, p1/p2 or a/b for the player who won them.
"""

import os
import sys

from scoring.types import InvalidScore


def _fail(err):
    print(f"Error: {err}")
    sys.exit(1)


def cmd_score():
    """Print the final score for a sequence of points."""
    from scoring.game import parse_points, score_game

    try:
        print(score_game(parse_points(sys.argv[2:])))
    except (InvalidScore, ValueError) as err:
        _fail(err)


def cmd_replay():
    """Print the score after every point."""
    from scoring.game import parse_points, replay_game

    try:
        points = parse_points(sys.argv[2:])
        snapshots = replay_game(points)
    except (InvalidScore, ValueError) as err:
        _fail(err)

    print(f"  Start:    {snapshots[0]}")
    for i, (point, snap) in enumerate(zip(points, snapshots[1:])):
        print(f"  Point {i+1:2d}: {point.player.label} -> {snap}")


def cmd_simulate():
    """Simulate a random game and print its progression and stats."""
    from scoring.game import DEFAULT_P1_WIN_PROB, game_stats, replay_game, simulate_points

    print("=" * 60)
    print("  SIMULATED TENNIS GAME")
    print("=" * 60)

    try:
        prob = float(sys.argv[2]) if len(sys.argv) > 2 else DEFAULT_P1_WIN_PROB
        points = simulate_points(prob)
    except ValueError as err:
        _fail(err)

    for i, (point, snap) in enumerate(zip(points, replay_game(points)[1:])):
        print(f"  Point {i+1:2d}: {point.player.label} wins  [{snap}]")

    s = game_stats(points)
    print()
    print(f"  FINAL SCORE: {s['score']}")
    print(f"  WINNER: {s['winner']}")
    print(f"  Points won: P1 {s['p1_points']}  |  P2 {s['p2_points']}  (of {s['total_points']})")
    print("=" * 60)


def cmd_analyze():
    """Generate all analysis charts."""
    print("Generating analysis charts...")
    print("-" * 60)
    from sim.analysis import generate_all_charts
    output_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)), "output")
    paths = generate_all_charts(output_dir=output_dir)
    print(f"\nDone! {len(paths)} charts saved to {output_dir}/")


def cmd_test():
    """Run all tests."""
    import subprocess
    print("Running tests...")
    print("-" * 60)
    result = subprocess.run(
        [sys.executable, "-m", "pytest", "tests/", "-v"],
        cwd=os.path.dirname(os.path.abspath(__file__)),
    )
    sys.exit(result.returncode)


COMMANDS = {
    "score": cmd_score,
    "replay": cmd_replay,
    "simulate": cmd_simulate,
    "analyze": cmd_analyze,
    "test": cmd_test,
}


def main():
    if len(sys.argv) < 2 or sys.argv[1] not in COMMANDS:
        print(__doc__)
        print("Available commands:")
        for name, func in COMMANDS.items():
            print(f"  {name:12s} {func.__doc__}")
        sys.exit(1)

    COMMANDS[sys.argv[1]]()


if __name__ == "__main__":
    main()
