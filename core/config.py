import os
import logging
from dotenv import load_dotenv

load_dotenv()

class Settings:
    """Application settings and configuration."""
    # Firebase service account key, as a JSON string
    FIREBASE_SERVICE_ACCOUNT_KEY_JSON = os.getenv("FIREBASE_SERVICE_ACCOUNT_KEY_JSON")

    # Firebase Realtime Database URL (trips and packing lists live here)
    FIREBASE_DATABASE_URL = os.getenv("FIREBASE_DATABASE_URL")

    # External APIs
    OPENWEATHER_API_KEY = os.getenv("OPENWEATHER_API_KEY")

    # Nominatim (OpenStreetMap) for geocoding, OSRM for driving routes.
    # Both are free public services; point these at self-hosted instances in production.
    NOMINATIM_URL = os.getenv("NOMINATIM_URL", "https://nominatim.openstreetmap.org")
    NOMINATIM_USER_AGENT = os.getenv("NOMINATIM_USER_AGENT", "packpal-backend/0.1")
    OSRM_URL = os.getenv("OSRM_URL", "https://router.project-osrm.org")

    HTTP_TIMEOUT_SECONDS = float(os.getenv("HTTP_TIMEOUT_SECONDS", "15"))

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    CORS_ORIGINS = [
        origin.strip()
        for origin in os.getenv(
            "CORS_ORIGINS",
            "http://localhost:8080,http://localhost:3000,http://localhost:5173,http://127.0.0.1:5173",
        ).split(",")
        if origin.strip()
    ]

settings = Settings()

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
