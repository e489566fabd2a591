import os

from .config import Config, FIREBASE_CONFIG

SECRET_KEY = Config.SECRET_KEY

FIREBASE_CONFIG = dict(FIREBASE_CONFIG)

PORT = Config.PORT
CORS_ORIGINS = Config.CORS_ORIGINS
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()

MAX_CONTENT_LENGTH = Config.MAX_CONTENT_LENGTH
MAX_COURSE_IMAGE_MB = Config.MAX_COURSE_IMAGE_MB
MAX_HELP_IMAGE_MB = Config.MAX_HELP_IMAGE_MB

DEBUG = bool(int(os.getenv("DEBUG", "1")))
