DEFAULT_EASE_FACTOR = 2.5
MIN_EASE_FACTOR = 1.3

MIN_QUALITY = 1
MAX_QUALITY = 5
# Shared by the update algorithm and session accuracy
ACCEPTABLE_QUALITY = 3

FIRST_INTERVAL_DAYS = 1    # after the first acceptable review
SECOND_INTERVAL_DAYS = 6   # after the second one
LAPSE_INTERVAL_DAYS = 1

# repetitions >= this means the card left learning
REVIEW_REPETITIONS = 2
