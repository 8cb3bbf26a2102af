from pathlib import Path
from dotenv import load_dotenv
import os

BASE_DIR = Path(__file__).resolve().parent.parent
load_dotenv(BASE_DIR / ".env")

class Config:
    # API mock (mockapi.io); el recurso cuelga de la URL base
    API_BASE_URL = os.getenv("API_BASE_URL", "https://67404657d0b59228b7ef578e.mockapi.io").rstrip("/")
    RESOURCE = os.getenv("RESOURCE", "Books").strip("/")
    HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "10"))
    APP_TITLE = os.getenv("APP_TITLE", "User inform")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    # Ventana tipo teléfono en modo escritorio
    WINDOW_WIDTH = 450
    WINDOW_HEIGHT = 800
