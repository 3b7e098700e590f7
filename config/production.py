import os

from .config import Config, firebase_config_from_env

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

FIREBASE_CONFIG = firebase_config_from_env()

FETCH_WORKERS = Config.FETCH_WORKERS

DEBUG = False

LOG_LEVEL = Config.LOG_LEVEL
