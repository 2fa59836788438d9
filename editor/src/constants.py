"""
RunSnap Story Editor - Constants and Configuration

This module contains all constant values used throughout the application:
- Output canvas resolution
- Transform (scale) constraints and zoom steps
- Overlay layout ratios (everything relative to canvas size)
- Stat label glyphs and placeholders
- Export settings
"""

# ======================================================================
# OUTPUT CANVAS
# ======================================================================
# Fixed story resolution (9:16). Independent of photo and viewport size.

OUTPUT_WIDTH = 1080
OUTPUT_HEIGHT = 1920
OUTPUT_SIZE = (OUTPUT_WIDTH, OUTPUT_HEIGHT)

# Cleared canvas colour (fully transparent, exports as black)
CANVAS_CLEAR_COLOR = (0, 0, 0, 0)

# ======================================================================
# SCALE CONSTRAINTS
# ======================================================================

SCALE_MIN = 0.05
SCALE_MAX = 20.0
DEFAULT_SCALE = 1.0

# Wheel zoom multipliers applied per wheel notch
WHEEL_ZOOM_IN_FACTOR = 1.1
WHEEL_ZOOM_OUT_FACTOR = 0.9

# ======================================================================
# OVERLAY LAYOUT
# ======================================================================
# All ratios are relative to canvas width or frame side, never pixels.

FRAME_SIDE_RATIO = 0.5           # frame side = canvas width * ratio
FRAME_MARGIN_RATIO = 0.06        # margin = frame side * ratio
DATE_FONT_DIVISOR = 22           # date font = floor(frame side / divisor)
STATS_FONT_DIVISOR = 17          # stats font = floor(frame side / divisor)
STATS_COLUMNS = 3

# 6px border, 15px blur and 3px shadow offset at 1080 wide
FRAME_BORDER_RATIO = 6 / 1080
SHADOW_BLUR_RATIO = 15 / 1080
SHADOW_OFFSET_RATIO = 3 / 1080
SHADOW_OPACITY = 0.5

OVERLAY_COLOR = (255, 255, 255, 255)
SHADOW_COLOR = (0, 0, 0)

# ======================================================================
# STAT LABELS
# ======================================================================

# Prefixes used when icons are on; one flag switches all of them
STAT_ICONS = {
    'heart_rate': '❤ ',
    'temperature': '\U0001F321 ',
    'time': '⏱ ',
    'distance': '\U0001F4CD ',
    'pace': '⚡ ',
}

PACE_NO_DISTANCE = "-'--\""
PACE_OUT_OF_RANGE = "--'--\""
PACE_MAX_MINUTES = 100

SECONDARY_SEPARATOR = '  '
EMPTY_DISTANCE_TEXT = '0.0'

# Month/day label. Fields: {month}, {day}, {month_name}, {month_abbr}
DEFAULT_DATE_FORMAT = '{month_name} {day}'
KOREAN_DATE_FORMAT = '{month}월 {day}일'

# ======================================================================
# EXPORT
# ======================================================================

JPEG_QUALITY = 90
EXPORT_BACKGROUND = (0, 0, 0)

# ======================================================================
# CONFIGURATION
# ======================================================================

CONFIG_DIR_NAME = '.runsnap'
CONFIG_FILE_NAME = 'config.json'
CONFIG_ENV_VAR = 'RUNSNAP_CONFIG'
