import os

DEFAULT_GOAL_PERCENTAGE = float(os.getenv("DEFAULT_GOAL_PERCENTAGE", "75"))
CALCULATOR_CACHE_SIZE = int(os.getenv("CALCULATOR_CACHE_SIZE", "256"))

DEBUG = bool(int(os.getenv("DEBUG", "1")))
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
