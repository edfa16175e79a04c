import logging
import json
import os
from datetime import datetime, timezone
from typing import Any

from app.config import LOG_DIR

logging.basicConfig(level=logging.INFO)


def log_debug(message: str, data: Any = None, service: str = "general", verbose: bool = True):
    """
    Append an entry to ``<LOG_DIR>/<service>_debug.log`` and the ``app.<service>`` logger.

    ``data`` is dumped as JSON when it is a dict or list; with ``verbose=False``
    only its keys or length are recorded.
    """
    timestamp = datetime.now(timezone.utc).isoformat()
    log_entry = f"\n[{timestamp}] {message}\n"

    if data is not None:
        if verbose:
            if isinstance(data, (dict, list)):
                log_entry += json.dumps(data, indent=2, default=str)
            else:
                log_entry += str(data)
        else:
            # For non-verbose, just log summary
            if isinstance(data, dict):
                log_entry += f"Keys: {list(data.keys())}\n"
            elif isinstance(data, list):
                log_entry += f"List length: {len(data)}\n"
            else:
                log_entry += str(data)
        log_entry += "\n"

    # Ensure logs directory exists
    os.makedirs(LOG_DIR, exist_ok=True)

    # Write to service-specific log file
    log_file = os.path.join(LOG_DIR, f"{service}_debug.log")
    with open(log_file, "a") as f:
        f.write(log_entry)

    logging.getLogger(f"app.{service}").info(log_entry.strip())
