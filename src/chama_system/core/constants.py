"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_MIN_SECRET_LENGTH = 8
ID_ENTROPY_BYTES = 16
DEFAULT_UPLOAD_DIR = "uploads"
