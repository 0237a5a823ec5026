"""hud.py - Fighter panels under the arena: name, HP bar, speed, damage.

The HUD is a stats observer: the combat dispatcher calls
``on_stats_changed(ball)`` after every hook, and the HUD only copies
the numbers it shows.  Drawing happens in the presentation step.
"""

from __future__ import annotations

import math

import pygame
from settings import (
    WHITE, GREEN, RED, GRAY, HUD_BG,
    SCREEN_WIDTH, ARENA_HEIGHT, HUD_HEIGHT,
    HEALTHBAR_WIDTH, HEALTHBAR_HEIGHT,
    P1_HUD_X, P2_HUD_X, HUD_Y,
    FONT_SIZE, SMALL_FONT_SIZE,
)

_LERP_SPEED = 0.15  # interpolation factor per frame


class FighterPanel:
    """Display copy of one ball's stats."""

    __slots__ = ("player_id", "name", "color", "hp", "max_hp",
                 "speed", "damage", "displayed_hp")

    def __init__(self, player_id: int):
        self.player_id = player_id
        self.name = ""
        self.color = WHITE
        self.hp = 0.0
        self.max_hp = 1.0
        self.speed = 0.0
        self.damage = 0.0
        self.displayed_hp: float | None = None

    @property
    def hp_text(self) -> str:
        return str(math.ceil(self.hp))

    @property
    def speed_text(self) -> str:
        return f"{self.speed:.1f}"

    @property
    def damage_text(self) -> str:
        return f"{self.damage:.1f}"


class Hud:
    """Two fighter panels plus their health bars."""

    def __init__(self):
        self.panels = {1: FighterPanel(1), 2: FighterPanel(2)}
        self._font: pygame.font.Font | None = None
        self._small_font: pygame.font.Font | None = None

    def on_stats_changed(self, ball):
        panel = self.panels[ball.player_id]
        char = ball.character
        if char is not None:
            panel.name = char.name
            panel.color = char.color
        panel.hp = ball.hp
        panel.max_hp = ball.max_hp
        panel.speed = ball.speed
        panel.damage = ball.damage
        if panel.displayed_hp is None or panel.hp > panel.displayed_hp:
            panel.displayed_hp = panel.hp

    def versus_text(self, player_id: int) -> str:
        other = self.panels[2 if player_id == 1 else 1]
        return f"VS {other.name}"

    # ── Drawing ───────────────────────────────────────────

    def draw(self, surface: pygame.Surface):
        if self._font is None:
            self._font = pygame.font.SysFont(None, FONT_SIZE)
            self._small_font = pygame.font.SysFont(None, SMALL_FONT_SIZE)

        pygame.draw.rect(surface, HUD_BG, (0, ARENA_HEIGHT, SCREEN_WIDTH, HUD_HEIGHT))
        for pid, x in ((1, P1_HUD_X), (2, P2_HUD_X)):
            self._draw_panel(surface, self.panels[pid], x, HUD_Y)

    def _draw_panel(self, surface, panel: FighterPanel, x: int, y: int):
        title = self._font.render(f"P{panel.player_id}: {panel.name}", True, panel.color)
        surface.blit(title, (x, y))

        vs = self._small_font.render(self.versus_text(panel.player_id), True, (160, 160, 160))
        surface.blit(vs, (x + HEALTHBAR_WIDTH - vs.get_width(), y + 2))

        self._draw_bar(surface, panel, x, y + 24)

        line = f"Speed {panel.speed_text}   Damage {panel.damage_text}"
        stats = self._small_font.render(line, True, WHITE)
        surface.blit(stats, (x, y + 24 + HEALTHBAR_HEIGHT + 8))

    def _draw_bar(self, surface, panel: FighterPanel, x: int, y: int):
        """Health bar whose fill eases down toward the real HP."""
        if panel.displayed_hp is None:
            panel.displayed_hp = panel.hp
        panel.displayed_hp += (panel.hp - panel.displayed_hp) * _LERP_SPEED

        bg_rect = pygame.Rect(x, y, HEALTHBAR_WIDTH, HEALTHBAR_HEIGHT)
        pygame.draw.rect(surface, GRAY, bg_rect, border_radius=4)

        frac = max(0.0, min(1.0, panel.displayed_hp / max(1.0, panel.max_hp)))
        fill_w = int(HEALTHBAR_WIDTH * frac)
        if fill_w > 0:
            color = GREEN if frac > 0.3 else RED
            pygame.draw.rect(surface, color, (x, y, fill_w, HEALTHBAR_HEIGHT), border_radius=4)

        pygame.draw.rect(surface, (180, 180, 180), bg_rect, 2, border_radius=4)

        hp_text = self._small_font.render(f"{panel.hp_text}/{math.ceil(panel.max_hp)}", True, WHITE)
        surface.blit(hp_text, (x + (HEALTHBAR_WIDTH - hp_text.get_width()) // 2,
                               y + (HEALTHBAR_HEIGHT - hp_text.get_height()) // 2))
