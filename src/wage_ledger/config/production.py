import os

DEBUG = False

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_JSON = bool(int(os.getenv("LOG_JSON", "1")))

STATEMENT_DAYS = int(os.getenv("STATEMENT_DAYS", "14"))

COVERAGE_THRESHOLD = 0.80
