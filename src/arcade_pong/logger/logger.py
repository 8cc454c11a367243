"""
Logging module for the project
"""

import os
import logging

# Set ARCADE_PONG_LOG_LEVEL=DEBUG to see every paddle hit and wall bounce
LOG_LEVEL_ENV_VAR = "ARCADE_PONG_LOG_LEVEL"

logging.basicConfig(
    level=os.environ.get(LOG_LEVEL_ENV_VAR, "INFO").upper(), format="%(message)s"
)
logger = logging.getLogger(__name__)
