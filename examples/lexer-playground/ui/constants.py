"""Layout constants and color definitions."""

# Timing
FPS = 30

# Layout dimensions
SCREEN_W = 900
SCREEN_H = 520
NODE_W = 96
NODE_H = 44
NODE_GAP = 12
GRAPH_Y = 40
TEXT_Y = 150
TOKENS_Y = 220
STATUS_H = 36

# Colors
BG_COLOR = (20, 20, 30)
NODE_BG = (35, 35, 52)
NODE_BORDER = (70, 70, 95)
STATUS_BG = (35, 35, 50)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)
LABEL_COLOR = (180, 180, 200)

# Machine position colors
CURRENT_COLOR = (60, 220, 80)
PREVIOUS_COLOR = (255, 160, 40)
CHANGED_COLOR = (100, 255, 100)

# State kind name -> color
KIND_COLORS: dict[str, tuple[int, int, int]] = {
    "start": (128, 128, 128),
    "name": (0, 220, 220),
    "number": (255, 160, 40),
    "string": (220, 80, 220),
    "space": (90, 90, 110),
    "operator": (240, 240, 120),
    "newline": (90, 90, 110),
    "string_end": (220, 80, 220),
}
