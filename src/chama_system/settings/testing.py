import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "chama_test"),
}

PERSISTENCE_BACKEND = "memory"
DOCUMENT_BACKEND = "memory"

UPLOAD_DIR = os.getenv("UPLOAD_DIR", "uploads-test")
MIN_SECRET_LENGTH = 8

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
