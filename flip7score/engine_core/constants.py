"""Game constants"""

MIN_NUMBER_CARD = 0
MAX_NUMBER_CARD = 12

# Seven distinct number cards end the round with a bonus
MAX_NUMBER_CARDS = 7
FLIP_SEVEN_BONUS = 15

WIN_THRESHOLD = 200

BUST_TOKEN = "BUST"
