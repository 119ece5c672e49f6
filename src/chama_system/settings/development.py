import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "chama_db"),
}

# "memory" keeps everything in-process; "mysql" uses DB_CONFIG
PERSISTENCE_BACKEND = os.getenv("PERSISTENCE_BACKEND", "memory")

DOCUMENT_BACKEND = os.getenv("DOCUMENT_BACKEND", "local")
UPLOAD_DIR = os.getenv("UPLOAD_DIR", "uploads")
MIN_SECRET_LENGTH = int(os.getenv("MIN_SECRET_LENGTH", "8"))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
