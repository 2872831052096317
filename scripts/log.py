"""
Catalog store - Logging Module
Provides centralized logging functionality for the store and CLI.
"""
import sys
from datetime import datetime

from conf import LOG_FILE, STORAGE_ROOT

# =============================================================================
# CONFIGURATION
# =============================================================================

LOG = True  # Set to False to disable logging
LOG_TO_STDERR = True  # Use stderr so logs don't pollute CLI stdout
first_line = True

# =============================================================================
# LOGGING
# =============================================================================

def store_log(message: str) -> None:
    """Append log message to store.log if LOG is enabled."""
    global first_line
    if not LOG:
        return
    if first_line:
        first_line = False
        LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
        store_log("--- New Catalog Store Session ---")
        store_log("Default storage root: " + str(STORAGE_ROOT))
    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    log_line = f"[{timestamp}] {message}\n"
    if LOG_TO_STDERR:
        sys.stderr.write(log_line)
    with open(LOG_FILE, "a", encoding="utf-8") as f:
        f.write(log_line)
