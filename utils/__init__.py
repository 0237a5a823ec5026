"""utils package – Reusable drawing helpers."""

from .helpers import draw_centered_text, draw_end_screen, draw_idle_hint
