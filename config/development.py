import os

from .config import Config, firebase_config_from_env

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

FIREBASE_CONFIG = firebase_config_from_env()

FETCH_WORKERS = Config.FETCH_WORKERS

DEBUG = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()
