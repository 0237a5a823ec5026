"""
simulation_runner.py – Automated headless match simulation.

Runs N matches with no window and no input, stepping each match on a
fixed 60 FPS simulated clock so weapon cooldowns behave exactly as in
the rendered game.

Usage (from CLI):
    python main.py --simulate 50
    python main.py --simulate 20 --p1 sword --p2 unarmed --seed 7
"""

from __future__ import annotations

import logging
import random
from collections import Counter
from dataclasses import dataclass

from characters import REGISTRY, CharacterRegistry
from settings import FPS, FRAME_MS, SIMULATION_MAX_SECONDS
from systems.match import Match, MatchState

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════
#  Per-match result
# ══════════════════════════════════════════════════════════

@dataclass
class MatchResult:
    """Lightweight record for one simulated match."""
    match_number: int = 0
    winner: int = 0                # 1, 2, or 0 when the frame cap was hit
    p1_character: str = ""
    p2_character: str = ""
    frames: int = 0
    duration_sec: float = 0.0
    p1_hp: float = 0.0
    p2_hp: float = 0.0


# ══════════════════════════════════════════════════════════
#  Simulation Runner
# ══════════════════════════════════════════════════════════

class SimulationRunner:
    """Run *n_matches* headless matches.

    Parameters
    ----------
    n_matches : int
        How many matches to run.
    p1, p2 : str | None
        Fixed character ids; None picks one at random per match.
    seed : int | None
        Seed for character picks and launch velocities.
    """

    def __init__(self, n_matches: int = 10, p1: str | None = None,
                 p2: str | None = None, seed: int | None = None,
                 registry: CharacterRegistry = REGISTRY,
                 max_frames: int = FPS * SIMULATION_MAX_SECONDS) -> None:
        self._n_matches = max(1, n_matches)
        self._p1 = p1
        self._p2 = p2
        self._rng = random.Random(seed)
        self._registry = registry
        self._max_frames = max_frames
        self._results: list[MatchResult] = []

    @property
    def results(self) -> list[MatchResult]:
        return self._results

    # ── Public entry point ────────────────────────────────

    def run(self) -> list[MatchResult]:
        """Execute all N matches, then print and return results."""
        for i in range(1, self._n_matches + 1):
            result = self._run_one_match(i)
            self._results.append(result)
            logger.info(
                "Match %d: winner=%s  p1=%s  p2=%s  frames=%d  hp=%.0f/%.0f",
                i, result.winner or "none", result.p1_character, result.p2_character,
                result.frames, result.p1_hp, result.p2_hp,
            )
        self._print_summary()
        return self._results

    # ── Single match ──────────────────────────────────────

    def _pick(self, fixed: str | None) -> str:
        if fixed is not None:
            return fixed
        return self._rng.choice(self._registry.list_ids())

    def _run_one_match(self, match_number: int) -> MatchResult:
        p1 = self._pick(self._p1)
        p2 = self._pick(self._p2)
        match = Match(p1, p2, registry=self._registry,
                      rng=random.Random(self._rng.getrandbits(32)))
        match.start()

        now = 0.0
        while match.state is MatchState.RUNNING and match.frame < self._max_frames:
            match.step(now)
            now += FRAME_MS

        return MatchResult(
            match_number=match_number,
            winner=match.winner or 0,
            p1_character=p1,
            p2_character=p2,
            frames=match.frame,
            duration_sec=match.frame / FPS,
            p1_hp=match.ball1.hp,
            p2_hp=match.ball2.hp,
        )

    # ── Summary ───────────────────────────────────────────

    def win_counts(self) -> Counter:
        """Wins per character id; timeouts are counted under "draw"."""
        counts: Counter = Counter()
        for r in self._results:
            if r.winner == 1:
                counts[r.p1_character] += 1
            elif r.winner == 2:
                counts[r.p2_character] += 1
            else:
                counts["draw"] += 1
        return counts

    def _print_summary(self) -> None:
        n = len(self._results)
        if n == 0:
            return
        avg_dur = sum(r.duration_sec for r in self._results) / n
        print("\n" + "=" * 52)
        print(f"  SIMULATION SUMMARY  ({n} matches)")
        print("=" * 52)
        print(f"  Avg duration     : {avg_dur:.1f}s")
        for name, wins in self.win_counts().most_common():
            print(f"  {name:<16} : {wins} ({wins / n:.0%})")
        print("=" * 52 + "\n")
