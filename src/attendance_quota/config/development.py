import os

# Quota defaults used when a request does not override them
REQUIRED_PERCENTAGE = float(os.getenv("REQUIRED_PERCENTAGE", "85"))
WEEKS_PER_MONTH = int(os.getenv("WEEKS_PER_MONTH", "4"))
MONTHS_IN_TERM = int(os.getenv("MONTHS_IN_TERM", "3"))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
