import os
from pathlib import Path


class Config:
    # Directory holding products.json
    DATA_DIR = Path(os.getenv("STOCKROOM_DATA_DIR", "data"))

    # Logging level name for the CLI (DEBUG, INFO, WARNING, ...)
    LOG_LEVEL = os.getenv("STOCKROOM_LOG_LEVEL", "WARNING")
