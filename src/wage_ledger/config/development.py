import os

DEBUG = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
LOG_JSON = bool(int(os.getenv("LOG_JSON", "0")))

# Default ledger statement window, in days ending today
STATEMENT_DAYS = int(os.getenv("STATEMENT_DAYS", "14"))

COVERAGE_THRESHOLD = 0.80
