import os
import sys
import logging

from dotenv import load_dotenv

# Load environment variables from .env
load_dotenv()

###############################################
# EXTERNAL SENTIMENT CLASSIFIER
###############################################
DEFAULT_SENTIMENT_API_ENDPOINT = "http://127.0.0.1:5000/predict"
DEFAULT_SENTIMENT_API_TIMEOUT = 30

###############################################
# DATABASE / DASHBOARD
###############################################
DEFAULT_DATABASE_URL = "sqlite:///sentiment.db"
DEFAULT_DASHBOARD_LOCALE = "en"

LOG_FORMAT = "%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]"


def load_settings():
    """
    Reads the service settings from the environment and returns them as a
    dict of Flask config keys.
    """
    return {
        "SENTIMENT_API_ENDPOINT": os.getenv("SENTIMENT_API_ENDPOINT", DEFAULT_SENTIMENT_API_ENDPOINT),
        "SENTIMENT_API_TIMEOUT": float(os.getenv("SENTIMENT_API_TIMEOUT", DEFAULT_SENTIMENT_API_TIMEOUT)),
        "SQLALCHEMY_DATABASE_URI": os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL),
        "SQLALCHEMY_TRACK_MODIFICATIONS": False,
        "DASHBOARD_LOCALE": os.getenv("DASHBOARD_LOCALE", DEFAULT_DASHBOARD_LOCALE),
        "LOG_LEVEL": os.getenv("LOG_LEVEL", "INFO").upper(),
    }


def configure_logging(level="INFO"):
    """Attach a single stdout handler to the package logger."""
    logger = logging.getLogger("sentiment_server")
    logger.setLevel(level)
    if not logger.handlers:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(console_handler)
    return logger
