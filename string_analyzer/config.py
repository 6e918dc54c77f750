import os
from dotenv import load_dotenv
import logging

load_dotenv()
logger = logging.getLogger(__name__)

# ------------------------------------------------------------------------------
# SERVER
# ------------------------------------------------------------------------------

HOST = os.getenv("HOST", "0.0.0.0")

try:
    PORT = int(os.getenv("PORT", 8000))
except ValueError:
    logger.warning("PORT is not a number, falling back to 8000")
    PORT = 8000

# ------------------------------------------------------------------------------
# LOGGING
# ------------------------------------------------------------------------------

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

APP_TITLE = "String Analyzer Service"
APP_VERSION = "1.0.0"
