import os

SECRET_KEY = "test-secret"

FIREBASE_CONFIG = {
    "project_id": os.getenv("FIREBASE_PROJECT_ID", "demo-school-attendance"),
    "credentials_path": "",
    "credentials_json": "",
}

FETCH_WORKERS = 2

DEBUG = False
TESTING = True

LOG_LEVEL = "WARNING"
