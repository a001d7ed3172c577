"""
Application constants and metadata.
"""

# Application info
APP_NAME = "nginx-directive"
APP_VERSION = "0.1.0"

# Default values
DEFAULT_INDENT = 4
DEFAULT_FILENAME = "<string>"
DEFAULT_ENCODING = "utf-8"
