"""
match_stats.py  –  Per-match statistics tracking.

MatchStats collects combat events during a single match and samples
both balls' HP every frame.  At match end it can print a formatted
summary and save an HP-trend line graph via matplotlib.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import matplotlib
matplotlib.use("Agg")  # non-interactive backend so the plot doesn't block pygame
import matplotlib.pyplot as plt

from settings import FPS

if TYPE_CHECKING:
    from entities.ball import Ball
    from systems.combat_system import CombatResult

logger = logging.getLogger(__name__)


class MatchStats:
    """Tracks events for one match and produces end-of-match reports.

    Per-player counters are dicts keyed by player id (1, 2):
        damage_dealt      – HP removed from the opponent
        ball_hits         – approaching contacts this player's hook ran for
        projectile_hits   – projectiles of this player that struck
        shots_fired       – projectiles spawned
        wall_hits         – arena bounces
    """

    def __init__(self, p1_character: str, p2_character: str):
        self.characters = {1: p1_character, 2: p2_character}

        self.damage_dealt = {1: 0.0, 2: 0.0}
        self.ball_hits = {1: 0, 2: 0}
        self.projectile_hits = {1: 0, 2: 0}
        self.shots_fired = {1: 0, 2: 0}
        self.wall_hits = {1: 0, 2: 0}

        self.frames = 0
        self.winner: int | None = None

        # (frame, p1 hp, p2 hp)
        self.hp_history: list[tuple[int, float, float]] = []

    # ===========================================================
    #  Per-frame / per-event recorders
    # ===========================================================

    def record(self, result: CombatResult):
        pid = result.attacker.player_id
        if result.kind == "wall":
            self.wall_hits[pid] += 1
            return
        if result.kind == "ball":
            self.ball_hits[pid] += 1
        elif result.kind == "projectile":
            self.projectile_hits[pid] += 1
        self.damage_dealt[pid] += result.damage

    def record_shot(self, ball: Ball):
        self.shots_fired[ball.player_id] += 1

    def tick(self, ball1: Ball, ball2: Ball):
        """Call once per simulated frame."""
        self.frames += 1
        self.hp_history.append((self.frames, ball1.hp, ball2.hp))

    @property
    def duration(self) -> float:
        """Match length in seconds of simulated time."""
        return self.frames / FPS

    # ===========================================================
    #  End-of-match
    # ===========================================================

    def end_match(self, winner: int):
        self.winner = winner
        logger.info(
            "Match over after %d frames (%.1fs): Player %d (%s) wins",
            self.frames, self.duration, winner, self.characters[winner],
        )

    def print_summary(self):
        """Print a clean formatted match summary to stdout."""
        print("\n" + "=" * 52)
        print("  MATCH SUMMARY")
        print("=" * 52)
        result = f"Player {self.winner} Wins" if self.winner else "Unfinished"
        print(f"  Result           : {result}")
        print(f"  Match Duration   : {self.duration:.1f}s ({self.frames} frames)")
        for pid in (1, 2):
            print("-" * 52)
            print(f"  Player {pid} ({self.characters[pid]})")
            print(f"    Damage Dealt     : {self.damage_dealt[pid]:.1f}")
            print(f"    Ball Hits        : {self.ball_hits[pid]}")
            print(f"    Projectile Hits  : {self.projectile_hits[pid]}"
                  f" / {self.shots_fired[pid]} shots")
            print(f"    Wall Bounces     : {self.wall_hits[pid]}")
        print("=" * 52 + "\n")

    def plot_hp_history(self, filename: str = "hp_trend.png") -> str | None:
        """Save a line graph of both balls' HP over time to disk."""
        if not self.hp_history:
            return None

        t = [frame / FPS for frame, _, _ in self.hp_history]
        hp1 = [h for _, h, _ in self.hp_history]
        hp2 = [h for _, _, h in self.hp_history]

        fig, ax = plt.subplots()
        ax.plot(t, hp1, label=f"P1 {self.characters[1]}")
        ax.plot(t, hp2, label=f"P2 {self.characters[2]}")
        ax.set_xlabel("Time (seconds)")
        ax.set_ylabel("HP")
        ax.set_title(f"HP Trend  –  {self.characters[1]} vs {self.characters[2]}")
        ax.legend()
        ax.grid(True)

        fig.savefig(filename, dpi=100, bbox_inches="tight")
        plt.close(fig)
        logger.info("HP graph saved to %s", filename)
        return filename

    # ===========================================================
    #  Data accessors
    # ===========================================================

    def as_dict(self) -> dict:
        """Return a plain dict snapshot (useful for JSON serialisation)."""
        return {
            "characters":      dict(self.characters),
            "winner":          self.winner,
            "frames":          self.frames,
            "duration":        round(self.duration, 2),
            "damage_dealt":    dict(self.damage_dealt),
            "ball_hits":       dict(self.ball_hits),
            "projectile_hits": dict(self.projectile_hits),
            "shots_fired":     dict(self.shots_fired),
            "wall_hits":       dict(self.wall_hits),
        }
