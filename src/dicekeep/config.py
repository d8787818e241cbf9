import os

log_level = os.environ.get("DICEKEEP_LOG_LEVEL", "WARNING").upper()
