"""Application configuration constants."""

from __future__ import annotations

# Loop
TARGET_FPS = 60

# Window
WINDOW_TITLE = "clive"
WINDOW_FALLBACK_W = 1280
WINDOW_FALLBACK_H = 800
BG_COLOR = (0, 0, 0)

# Navigation step sizes
STEP_SMALL = 1
STEP_LARGE = 10  # while either shift key is held

# Command line defaults
DEFAULT_PATTERN = "*"
DEFAULT_DEST_FOLDER = "./keep"

# Supported image extensions
IMG_EXTS = frozenset({".jpg", ".jpeg", ".png", ".bmp", ".webp"})

# Formats raylib decodes itself; everything else goes through Pillow
RAYLIB_NATIVE_EXTS = frozenset({".jpg", ".jpeg", ".png", ".bmp"})

# Image limits
MAX_IMAGE_DIMENSION = 8192

# Hotkeys (raylib key codes)
# See: https://github.com/raysan5/raylib/blob/master/src/raylib.h
KEY_LEFT_SHIFT = 340
KEY_RIGHT_SHIFT = 344
SHIFT_KEYS = frozenset({KEY_LEFT_SHIFT, KEY_RIGHT_SHIFT})

KEYS_NEXT = frozenset({
    262,  # KEY_RIGHT
    68,   # KEY_D
    32,   # KEY_SPACE
})
KEYS_PREV = frozenset({
    263,  # KEY_LEFT
    65,   # KEY_A
    259,  # KEY_BACKSPACE
})
KEYS_FIRST = frozenset({268})  # KEY_HOME
KEYS_LAST = frozenset({269})   # KEY_END
KEYS_MOVE = frozenset({
    77,   # KEY_M
    257,  # KEY_ENTER
})
KEYS_QUIT = frozenset({
    256,  # KEY_ESCAPE
    81,   # KEY_Q
})
