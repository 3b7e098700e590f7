import os


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "school-attendance-secret"

    # Firestore
    FIREBASE_PROJECT_ID = os.environ.get("FIREBASE_PROJECT_ID", "")
    FIREBASE_CREDENTIALS = os.environ.get("FIREBASE_CREDENTIALS", os.environ.get("GOOGLE_APPLICATION_CREDENTIALS", ""))
    # Inline service-account JSON, used by hosts that only offer env vars.
    FIREBASE_KEY = os.environ.get("FIREBASE_KEY", "")

    FETCH_WORKERS = int(os.environ.get("FETCH_WORKERS", "4"))
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()


def firebase_config_from_env() -> dict:
    return {
        "project_id": Config.FIREBASE_PROJECT_ID,
        "credentials_path": Config.FIREBASE_CREDENTIALS,
        "credentials_json": Config.FIREBASE_KEY,
    }
