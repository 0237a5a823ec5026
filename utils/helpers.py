"""helpers.py - Reusable drawing helpers."""

import pygame
from settings import WHITE, DARK_TEXT, ARENA_WIDTH, ARENA_HEIGHT, FONT_SIZE


def draw_centered_text(surface, text, center, color=DARK_TEXT, size=FONT_SIZE):
    font = pygame.font.SysFont(None, size)
    rendered = font.render(text, True, color)
    surface.blit(rendered, rendered.get_rect(center=center))


def draw_end_screen(surface, message):
    """Cover the arena with a light overlay and show a large
    win message plus a restart hint."""
    overlay = pygame.Surface((ARENA_WIDTH, ARENA_HEIGHT))
    overlay.set_alpha(230)
    overlay.fill(WHITE)
    surface.blit(overlay, (0, 0))

    cx, cy = ARENA_WIDTH // 2, ARENA_HEIGHT // 2
    draw_centered_text(surface, message, (cx, cy - 20), DARK_TEXT, 64)
    draw_centered_text(surface, "Press R to Reset  |  ESC to Quit", (cx, cy + 40), DARK_TEXT, 28)


def draw_idle_hint(surface, message):
    """Translucent banner across the middle of the arena."""
    banner = pygame.Surface((ARENA_WIDTH, 60), pygame.SRCALPHA)
    banner.fill((0, 0, 0, 120))
    surface.blit(banner, (0, ARENA_HEIGHT // 2 - 30))
    draw_centered_text(surface, message, (ARENA_WIDTH // 2, ARENA_HEIGHT // 2), WHITE, 30)
