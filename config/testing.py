from .config import Config

SECRET_KEY = "test-secret"

# Tests inject in-memory stores; this is only used if a test builds the real container.
FIREBASE_CONFIG = {
    "database_url": "http://localhost:9000/?ns=course-admin-test",
    "credentials_path": "",
    "project_id": "course-admin-test",
}

PORT = Config.PORT
CORS_ORIGINS = "*"
LOG_LEVEL = "WARNING"

MAX_CONTENT_LENGTH = 8 * 1024 * 1024
MAX_COURSE_IMAGE_MB = 2
MAX_HELP_IMAGE_MB = 5

DEBUG = False
TESTING = True
