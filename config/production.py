import os

from .config import Config, FIREBASE_CONFIG

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

FIREBASE_CONFIG = dict(FIREBASE_CONFIG)

PORT = Config.PORT
# Comma separated list, "*" allows every origin
CORS_ORIGINS = [o.strip() for o in Config.CORS_ORIGINS.split(",")] if Config.CORS_ORIGINS != "*" else "*"
LOG_LEVEL = Config.LOG_LEVEL

MAX_CONTENT_LENGTH = Config.MAX_CONTENT_LENGTH
MAX_COURSE_IMAGE_MB = Config.MAX_COURSE_IMAGE_MB
MAX_HELP_IMAGE_MB = Config.MAX_HELP_IMAGE_MB

DEBUG = False
