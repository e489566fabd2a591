import os


class Config:
    """Values shared by every environment, read from the process environment."""

    SECRET_KEY = os.environ.get("SECRET_KEY") or "dev-secret-key"

    # Firebase project
    FIREBASE_DATABASE_URL = os.environ.get("FIREBASE_DATABASE_URL", "http://localhost:9000/?ns=course-admin")
    FIREBASE_CREDENTIALS = os.environ.get("FIREBASE_CREDENTIALS", os.environ.get("GOOGLE_APPLICATION_CREDENTIALS", ""))
    FIREBASE_PROJECT_ID = os.environ.get("FIREBASE_PROJECT_ID", "")

    PORT = int(os.environ.get("PORT", "2002"))
    CORS_ORIGINS = os.environ.get("CORS_ORIGINS", "*")
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

    # Request bodies carry base64 images; keep headroom above the largest image limit.
    MAX_CONTENT_LENGTH = int(os.environ.get("MAX_CONTENT_LENGTH", str(8 * 1024 * 1024)))
    MAX_COURSE_IMAGE_MB = float(os.environ.get("MAX_COURSE_IMAGE_MB", "2"))
    MAX_HELP_IMAGE_MB = float(os.environ.get("MAX_HELP_IMAGE_MB", "5"))


FIREBASE_CONFIG = {
    "database_url": Config.FIREBASE_DATABASE_URL,
    "credentials_path": Config.FIREBASE_CREDENTIALS,
    "project_id": Config.FIREBASE_PROJECT_ID,
}
