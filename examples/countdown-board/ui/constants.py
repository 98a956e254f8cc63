"""Layout constants and color definitions."""

# Timing
FPS = 30
TICK_INTERVAL_MS = 1000

# Layout dimensions
LIST_W = 360
DETAIL_W = 520
ROW_H = 44
STATUS_H = 32
ROWS = 8

SCREEN_W = LIST_W + DETAIL_W
SCREEN_H = ROW_H * ROWS + STATUS_H

# Badge
BADGE_W = 110
BADGE_H = 26

# Countdown boxes
BOX_SIZE = 96
BOX_GAP = 16

# Colors
BG_COLOR = (20, 20, 30)
ROW_BG = (30, 30, 45)
ROW_SELECTED = (45, 45, 70)
ROW_BORDER = (50, 50, 70)
STATUS_BG = (35, 35, 50)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)
ACCENT = (122, 30, 30)
BOX_BG = (240, 236, 228)
BOX_TEXT = (30, 20, 40)
BOX_LINE = (255, 51, 102)
