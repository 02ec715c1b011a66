DEFAULT_GOAL_PERCENTAGE = 75
# Memoization off so every test sees a fresh computation.
CALCULATOR_CACHE_SIZE = 0

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
