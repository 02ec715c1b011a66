import os

DEFAULT_GOAL_PERCENTAGE = float(os.getenv("DEFAULT_GOAL_PERCENTAGE", "75"))
CALCULATOR_CACHE_SIZE = int(os.getenv("CALCULATOR_CACHE_SIZE", "1024"))

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
