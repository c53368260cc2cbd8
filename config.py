import os

from dotenv import load_dotenv

load_dotenv()

# Server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")  # Options: "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"

# CORS: comma-separated list, "*" allows any origin
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "*").split(",")
    if origin.strip()
]
