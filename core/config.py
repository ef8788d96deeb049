import os
from dotenv import load_dotenv

load_dotenv()

# App Configuration
APP_TITLE = os.getenv("APP_TITLE", "Basic Register Form")
REGISTER_PATH = os.getenv("REGISTER_PATH", "/register")

# Server Configuration
HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "8000"))

# Logging Configuration
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
