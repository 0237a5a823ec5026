"""
main.py - Entry point for Ball Arena.

Two balls bounce around the arena under gravity, collide, and fight
with their characters' weapons until one runs out of HP.

Controls:
    SPACE   start
    P       pause / resume
    R       reset
    1 / 2   cycle Player 1 / Player 2 character
    ESC     quit

Run:  python main.py [--p1 sword] [--p2 unarmed] [--seed N] [--plot hp.png]
      python main.py --simulate 50
"""
VERSION = "1.0.0"

import argparse
import logging
import random
import sys

import pygame

logger = logging.getLogger(__name__)

# ── Project imports ───────────────────────────────────────
from settings import (
    SCREEN_WIDTH, SCREEN_HEIGHT, ARENA_WIDTH, ARENA_HEIGHT,
    FPS, TITLE, ARENA_BG, ARENA_BORDER, BALL_FONT_SIZE,
    DEFAULT_P1_CHARACTER, DEFAULT_P2_CHARACTER,
)
from characters import character_ids
from systems.hud import Hud
from systems.match import Match, MatchState
from systems.simulation_runner import SimulationRunner
from utils import draw_end_screen, draw_idle_hint


# ══════════════════════════════════════════════════════════
#  GAME CLASS
# ══════════════════════════════════════════════════════════

class Game:
    """Top-level game controller.  Owns the window, the loop and drawing."""

    def __init__(self, p1: str = DEFAULT_P1_CHARACTER,
                 p2: str = DEFAULT_P2_CHARACTER,
                 seed: int | None = None, plot_path: str | None = None):
        pygame.init()
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(TITLE)
        self.clock = pygame.time.Clock()
        self.arena = self.screen.subsurface((0, 0, ARENA_WIDTH, ARENA_HEIGHT))
        self.ball_font = pygame.font.SysFont(None, BALL_FONT_SIZE, bold=True)

        self.match = Match(p1, p2, rng=random.Random(seed))
        self.hud = Hud()
        self.match.add_observer(self.hud.on_stats_changed)
        self.match.add_end_listener(self._on_match_end)

        self.plot_path = plot_path
        self.running = True

    # ── Main loop ─────────────────────────────────────────

    def run(self):
        """Start the game loop."""
        while self.running:
            self.clock.tick(FPS)
            self._handle_events()
            self.match.step(pygame.time.get_ticks())
            self._draw()

        pygame.quit()

    # ── Events ────────────────────────────────────────────

    def _handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                self._handle_key(event.key)

    def _handle_key(self, key):
        if key == pygame.K_ESCAPE:
            self.running = False
        elif key == pygame.K_SPACE:
            self.match.start()
        elif key == pygame.K_p:
            state = self.match.pause()
            logger.info("Match %s", state.value)
        elif key == pygame.K_r:
            self.match.reset()
        elif key == pygame.K_1:
            self._cycle_character(1)
        elif key == pygame.K_2:
            self._cycle_character(2)

    def _cycle_character(self, player: int):
        ids = character_ids()
        current = self.match.ball(player).character.id
        nxt = ids[(ids.index(current) + 1) % len(ids)] if current in ids else ids[0]
        self.match.set_character(player, nxt)

    def _on_match_end(self, winner: int):
        logger.info("PLAYER %d WINS!", winner)
        self.match.stats.print_summary()
        if self.plot_path:
            self.match.stats.plot_hp_history(self.plot_path)

    # ── Drawing ───────────────────────────────────────────

    def _draw(self):
        self.arena.fill(ARENA_BG)
        self.match.projectile_system.draw(self.arena)
        for ball in self.match.balls:
            ball.draw(self.arena, self.ball_font)
        pygame.draw.rect(self.arena, ARENA_BORDER, self.arena.get_rect(), 2)

        state = self.match.state
        if state is MatchState.IDLE:
            draw_idle_hint(self.arena, "SPACE to start  |  1 / 2 to change fighters")
        elif state is MatchState.PAUSED:
            draw_idle_hint(self.arena, "PAUSED  –  P to resume")
        elif state is MatchState.ENDED:
            draw_end_screen(self.arena, f"PLAYER {self.match.winner} WINS!")

        self.hud.draw(self.screen)
        pygame.display.flip()


# ══════════════════════════════════════════════════════════
#  CLI
# ══════════════════════════════════════════════════════════

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description=TITLE)
    parser.add_argument("--p1", default=None, help="Player 1 character id")
    parser.add_argument("--p2", default=None, help="Player 2 character id")
    parser.add_argument("--seed", type=int, default=None, help="RNG seed for launch velocities")
    parser.add_argument("--simulate", type=int, default=0, metavar="N",
                        help="run N headless matches and print a summary")
    parser.add_argument("--plot", default=None, metavar="PATH",
                        help="save an HP-trend graph at the end of each match")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    args = parse_args(argv)
    known = character_ids()
    for cid in (args.p1, args.p2):
        if cid is not None and cid.lower() not in known:
            logger.error("Unknown character %r (choose from: %s)", cid, ", ".join(known))
            return 2

    if args.simulate:
        SimulationRunner(args.simulate, p1=args.p1, p2=args.p2, seed=args.seed).run()
        return 0

    Game(
        p1=args.p1 or DEFAULT_P1_CHARACTER,
        p2=args.p2 or DEFAULT_P2_CHARACTER,
        seed=args.seed,
        plot_path=args.plot,
    ).run()
    return 0


# ── Run ───────────────────────────────────────────────────
if __name__ == "__main__":
    sys.exit(main())
