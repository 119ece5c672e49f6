import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "chama_db"),
}

PERSISTENCE_BACKEND = os.getenv("PERSISTENCE_BACKEND", "mysql")

DOCUMENT_BACKEND = os.getenv("DOCUMENT_BACKEND", "local")
UPLOAD_DIR = os.getenv("UPLOAD_DIR", "/var/lib/chama/uploads")
MIN_SECRET_LENGTH = int(os.getenv("MIN_SECRET_LENGTH", "8"))

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
