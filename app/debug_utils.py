# app/debug_utils.py
import datetime
import logging
import os

import config

_configured = False


def setup_logging():
    """Configure file logging once per process and return the log file path."""
    global _configured
    log_filename = os.path.join(config.LOG_DIR, f"nyumbalink_{datetime.date.today()}.log")
    if _configured:
        return log_filename
    os.makedirs(config.LOG_DIR, exist_ok=True)

    logging.basicConfig(
        filename=log_filename,
        level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    _configured = True
    return log_filename
