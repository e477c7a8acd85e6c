# ------------------------------
# CONFIG
# ------------------------------
W, H = 1100, 760
FPS = 60
SPEEDS = ["SLOW", "NORMAL", "FAST"]
ALGORITHMS = ["FIFO", "LRU", "OPTIMAL"]

# Timeline grid
CELL_W = 48
CELL_H = 40
MAX_VISIBLE_STEPS = 19

# ------------------------------
# COLORS (Neo-dark dashboard)
# ------------------------------
BG = (14, 15, 18)            # app background
PANEL = (26, 28, 34)         # primary surface
BORDER = (70, 74, 88)        # subtle border (no bright white)
OUTLINE = (10, 11, 13)       # dark outline for chips/buttons
TEXT = (240, 242, 248)
MUTED = (170, 176, 192)

ACCENT = (92, 145, 255)
GOOD = (80, 200, 140)
BAD = (255, 120, 120)

HIT = GOOD
FAULT = BAD
EMPTY_CELL = (18, 19, 22)
GRID = (60, 62, 72)

SHADOW = (0, 0, 0)
SHADOW_ALPHA = 120
SHADOW_OFFSET = (0, 6)
HILITE = (255, 255, 255)
HILITE_ALPHA = 18

HEADER_STRIP_ALPHA = 170

# Per-page palette, picked by a stable hash of the page label
PAGE_COLORS = [
    (255, 99, 132),   # pink-red
    (54, 162, 235),   # blue
    (255, 206, 86),   # yellow
    (75, 192, 192),   # teal
    (153, 102, 255),  # purple
    (255, 159, 64),   # orange
    (46, 204, 113),   # green
    (52, 152, 219),   # light blue
    (241, 196, 15),   # gold
    (155, 89, 182),   # violet
    (26, 188, 156),   # aqua
]
