# backend/pricepath/config.py

"""
Runtime settings, read once from the environment.

PRICEPATH_FRONTEND          extra origin allowed by CORS (the deployed chart UI)
PRICEPATH_LOG_LEVEL         logging level name, e.g. DEBUG
PRICEPATH_LOG_FILE          also append log records to this file
PRICEPATH_PARSE_CACHE_SIZE  how many parsed path descriptions to keep around
"""

import logging
import os

FRONTEND_ORIGIN = os.getenv("PRICEPATH_FRONTEND", "")

CORS_ORIGINS = sorted(
    o for o in {
        FRONTEND_ORIGIN,
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:19006",  # expo web
    } if o
)

LOG_LEVEL = logging.getLevelName(os.getenv("PRICEPATH_LOG_LEVEL", "INFO").upper())
if not isinstance(LOG_LEVEL, int):
    LOG_LEVEL = logging.INFO

LOG_FILE = os.getenv("PRICEPATH_LOG_FILE") or None

PARSE_CACHE_SIZE = int(os.getenv("PRICEPATH_PARSE_CACHE_SIZE", "128"))
