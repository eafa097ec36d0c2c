"""
Game constants for ten-pin bowling.
"""

NUM_PINS = 10

# Frame indexes are 0-based: the tenth frame lives at index 9 and its extra
# rolls are held in the two bonus slots after it.
FINAL_FRAME = 10
FINAL_FRAME_INDEX = FINAL_FRAME - 1
FIRST_BONUS_INDEX = FINAL_FRAME
SECOND_BONUS_INDEX = FINAL_FRAME + 1
MAX_FRAMES = FINAL_FRAME + 2

SPARE_BONUS_ROLLS = 1
STRIKE_BONUS_ROLLS = 2

# Frames whose bonus may still be waiting on the incoming roll.
BONUS_LOOKBACK = 2
