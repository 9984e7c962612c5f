"""Matplotlib analysis charts — score progression and state occupancy heatmap."""

import os
import random

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend
import matplotlib.pyplot as plt
import numpy as np

from scoring.calls import MAX_POINTS, list_calls
from scoring.game import DEFAULT_P1_WIN_PROB, replay_game, simulate_points

P1_COLOR = "#e94560"
P2_COLOR = "#4fc3f7"


def _style_chart(ax, title):
    """Apply dark theme styling to chart."""
    ax.set_facecolor("#0f0f1a")
    ax.set_title(title, color="#e0e0e0", fontsize=13, fontweight="bold", pad=12)
    ax.tick_params(colors="#888888", labelsize=9)
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)
    ax.spines["bottom"].set_color("#333333")
    ax.spines["left"].set_color("#333333")
    ax.xaxis.label.set_color("#aaaaaa")
    ax.yaxis.label.set_color("#aaaaaa")


def chart_score_progression(points, save_path=None):
    """Chart 1: Score after each point, one step line per player."""
    snapshots = replay_game(points)
    x = np.arange(len(snapshots))
    p1 = [s.player_one.count for s in snapshots]
    p2 = [s.player_two.count for s in snapshots]

    fig, ax = plt.subplots(figsize=(8, 5))
    fig.set_facecolor("#0f0f1a")
    _style_chart(ax, f"Score Progression (final {snapshots[-1]})")

    ax.step(x, p1, where="post", color=P1_COLOR, linewidth=2, marker="o", label="Player 1")
    ax.step(x, p2, where="post", color=P2_COLOR, linewidth=2, marker="s", label="Player 2")

    ax.set_xlabel("Points played")
    ax.set_yticks(range(MAX_POINTS + 1))
    ax.set_yticklabels(list_calls())
    ax.set_ylim(-0.3, MAX_POINTS + 0.3)
    ax.legend(facecolor="#1a1a2e", edgecolor="#333", labelcolor="#e0e0e0", fontsize=9)
    ax.grid(True, alpha=0.15)

    plt.tight_layout()
    if save_path:
        fig.savefig(save_path, dpi=150, facecolor=fig.get_facecolor())
    return fig


def state_occupancy(games=500, p1_win_prob=DEFAULT_P1_WIN_PROB, seed=42):
    """Count visits to every (player 1, player 2) state over simulated games.

    Returns a (5, 5) int array indexed [p1_count, p2_count].
    """
    rng = random.Random(seed)
    visits = np.zeros((MAX_POINTS + 1, MAX_POINTS + 1), dtype=int)

    for _ in range(games):
        for snap in replay_game(simulate_points(p1_win_prob, rng)):
            visits[snap.player_one.count, snap.player_two.count] += 1

    return visits


def chart_state_heatmap(games=500, p1_win_prob=DEFAULT_P1_WIN_PROB, seed=42, save_path=None):
    """Chart 2: How often each score was reached across simulated games."""
    visits = state_occupancy(games, p1_win_prob, seed)
    calls = list_calls()

    fig, ax = plt.subplots(figsize=(7, 6))
    fig.set_facecolor("#0f0f1a")
    _style_chart(ax, f"Score Occupancy ({games} games, P1 wins {p1_win_prob:.0%} of points)")

    im = ax.imshow(visits, cmap="magma", origin="lower")
    for i in range(visits.shape[0]):
        for j in range(visits.shape[1]):
            if visits[i, j]:
                ax.text(j, i, str(visits[i, j]), ha="center", va="center", fontsize=8, color="#aaa")

    ax.set_xticks(range(len(calls)))
    ax.set_xticklabels(calls)
    ax.set_yticks(range(len(calls)))
    ax.set_yticklabels(calls)
    ax.set_xlabel("Player 2")
    ax.set_ylabel("Player 1")
    cbar = fig.colorbar(im, ax=ax)
    cbar.ax.tick_params(colors="#888888", labelsize=8)

    plt.tight_layout()
    if save_path:
        fig.savefig(save_path, dpi=150, facecolor=fig.get_facecolor())
    return fig


def generate_all_charts(output_dir="output", seed=42):
    """Generate every chart as PNG and return the saved paths."""
    os.makedirs(output_dir, exist_ok=True)
    paths = []

    points = simulate_points(rng=random.Random(seed))
    path = os.path.join(output_dir, "score_progression.png")
    fig = chart_score_progression(points, save_path=path)
    plt.close(fig)
    paths.append(path)
    print(f"  Saved: {path}")

    path = os.path.join(output_dir, "state_heatmap.png")
    fig = chart_state_heatmap(seed=seed, save_path=path)
    plt.close(fig)
    paths.append(path)
    print(f"  Saved: {path}")

    return paths
