DEBUG = False
TESTING = True

LOG_LEVEL = "WARNING"
LOG_JSON = False

STATEMENT_DAYS = 14

COVERAGE_THRESHOLD = 0.80
