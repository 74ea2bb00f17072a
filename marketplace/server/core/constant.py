"""Server-wide constants."""

PROJECT_NAME = "Marketplace Backend"
API_V1_STR = "/api/v1"
API_VERSION = "1.0.0"
