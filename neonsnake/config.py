"""
config.py — Shared constants for the entire application.
No logic, no imports from internal modules.
"""

import logging

# ── Grid ──────────────────────────────────────────────────────────
GRID_SIZE = 20
COLS = ROWS = GRID_SIZE

# ── Window ────────────────────────────────────────────────────────
CELL            = 20
GAME_W, GAME_H  = COLS * CELL, ROWS * CELL
PANEL_H         = 70
OFFSET_X        = 20
OFFSET_Y        = PANEL_H + 10
PAD_BUTTON      = 48
PAD_GAP         = 6
PAD_Y           = OFFSET_Y + GAME_H + 18
FOOTER_H        = 30
WIDTH           = GAME_W + 2 * OFFSET_X
HEIGHT          = PAD_Y + 3 * PAD_BUTTON + 2 * PAD_GAP + FOOTER_H + 10
FPS             = 60
TITLE           = "NEON SNAKE"
VERSION         = "1.0.0"

# ── Colors ────────────────────────────────────────────────────────
BG          = (10,  10,  10)
BOARD_BG    = (23,  23,  23)
GRID_COL    = (32,  32,  32)
SNAKE_HEAD  = (52,  211, 153)
SNAKE_BODY  = (5,   150, 105)
FOOD_COL    = (244, 63,  94)
ACCENT      = (16,  185, 129)
UI_COL      = (163, 163, 163)
UI_DIM      = (82,  82,  82)
WHITE       = (255, 255, 255)
BLACK       = (0,   0,   0)
BORDER_COL  = (38,  38,  38)

# ── Gameplay ──────────────────────────────────────────────────────
INITIAL_SNAKE     = ((10, 10), (10, 11), (10, 12))
INITIAL_DIRECTION = (0, -1)
INITIAL_FOOD      = (5, 5)
FOOD_REWARD       = 10

# Rejection sampling gives way to free-cell enumeration past this
# occupancy ratio or after this many misses.
FOOD_DENSE_THRESHOLD = 0.8
FOOD_MAX_ATTEMPTS    = 1000

# ── Timing (milliseconds per tick) ────────────────────────────────
INITIAL_INTERVAL = 150
SPEED_STEP       = 2
MIN_INTERVAL     = 60

# ── Game States ───────────────────────────────────────────────────
STATE_READY   = "ready"
STATE_PLAYING = "playing"
STATE_PAUSED  = "paused"
STATE_OVER    = "over"

# ── Logging ───────────────────────────────────────────────────────
LOG_LEVEL  = logging.INFO
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
