"""
settings.py - Game constants for Ball Arena.

All configurable values live here so they're easy to tweak
and easy to reference from any module.
"""

# ── Screen ────────────────────────────────────────────────
ARENA_WIDTH = 800
ARENA_HEIGHT = 500
HUD_HEIGHT = 100
SCREEN_WIDTH = ARENA_WIDTH
SCREEN_HEIGHT = ARENA_HEIGHT + HUD_HEIGHT
FPS = 60
FRAME_MS = 1000.0 / FPS        # simulated ms per frame (headless runs)
TITLE = "Ball Arena – Character Duel"

# ── Colors (R, G, B) ─────────────────────────────────────
WHITE = (255, 255, 255)
DARK_TEXT = (51, 51, 51)       # HP text on light balls / overlay text
ARENA_BG = (255, 255, 255)
ARENA_BORDER = (40, 40, 40)
HUD_BG = (30, 30, 30)
GRAY = (60, 60, 60)            # Health bar background
GREEN = (50, 200, 50)
RED = (220, 50, 50)

# ── Physics ───────────────────────────────────────────────
GRAVITY = 0.5                  # px / frame², balls only
BALL_OUTLINE_WIDTH = 3

# ── Reset / spawn ─────────────────────────────────────────
P1_SPAWN_X_FRAC = 0.25
P2_SPAWN_X_FRAC = 0.75
SPAWN_Y_FRAC = 0.5
RESET_SPEED_MIN = 3.0          # random launch speed range [min, max)
RESET_SPEED_MAX = 7.0

# ── Projectiles ───────────────────────────────────────────
PROJECTILE_MARGIN = 50         # px outside the arena before removal
KNOCKBACK_FACTOR = 0.3         # fraction of projectile velocity imparted

# ── Default characters ────────────────────────────────────
DEFAULT_P1_CHARACTER = "unarmed"
DEFAULT_P2_CHARACTER = "unarmed"

# ── Health bar / HUD ──────────────────────────────────────
HEALTHBAR_WIDTH = 220
HEALTHBAR_HEIGHT = 16
HUD_PADDING = 20
P1_HUD_X = HUD_PADDING
P2_HUD_X = SCREEN_WIDTH - HEALTHBAR_WIDTH - HUD_PADDING
HUD_Y = ARENA_HEIGHT + 12

# ── Font ──────────────────────────────────────────────────
FONT_SIZE = 22
SMALL_FONT_SIZE = 18
BALL_FONT_SIZE = 20

# ── Headless simulation ───────────────────────────────────
SIMULATION_MAX_SECONDS = 120   # frame cap per simulated match
