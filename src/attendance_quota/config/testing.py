REQUIRED_PERCENTAGE = 85.0
WEEKS_PER_MONTH = 4
MONTHS_IN_TERM = 3

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
