"""
Application constants for Gemini Dice

Rule constants are fixed by the Gemini System and are not configurable.
Deployment settings live in config.py.
"""

VERSION = "1.0.0"

# Die faces (six-sided dice only)
DIE_MIN_FACE = 1
DIE_MAX_FACE = 6

# Wild die triggers
ROLL_CRIT_FAILURE = DIE_MIN_FACE
ROLL_CRIT_SUCCESS = DIE_MAX_FACE

# Scoring thresholds
SUCCESS_THRESHOLD = 3
LUCK_FACE = DIE_MAX_FACE
UNLUCK_FACE = DIE_MIN_FACE

# Rollup conversion: three pips make one die
PIPS_PER_DIE = 3
PIP_ROUND_UP_FRACTION = 0.6

# Dice notation limits
MAX_DICE_PER_ROLL = 100

# Placeholder replaced by the rendered roll inside a message template
TEMPLATE_PLACEHOLDER = "%%ROLL%%"

# Speaker name used when the issuer cannot be resolved
DEFAULT_SPEAKER_NAME = "API"

# Red marker shown beside the failure badge after a zero-out
FAILURE_BADGE = "🟥"

# Unicode die faces
DIE_GLYPHS = {
    1: "⚀",
    2: "⚁",
    3: "⚂",
    4: "⚃",
    5: "⚄",
    6: "⚅",
}
