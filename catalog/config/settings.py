# catalog/config/settings.py

"""Central configuration for the product catalog."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Central configuration for the product catalog."""

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    DATA_DIR: Path = BASE_DIR / "data"
    LOGS_DIR: Path = BASE_DIR / "logs"
    DB_PATH: Path = Path(
        os.getenv("CATALOG_DB_PATH", str(DATA_DIR / "catalog.db"))
    )

    # --- Storage ---
    STORE_NAME: str = "products"        # Table holding one row per product

    # --- Browsing ---
    ALL_CATEGORIES: str = "all"         # Filter token meaning "no filter"

    # --- Product form ---
    TITLE_MIN_LENGTH: int = 3
    DESCRIPTION_MIN_LENGTH: int = 10
    URL_SCHEMES: list[str] = ["http", "https"]

    # --- Logging ---
    LOG_LEVEL: str = os.getenv("CATALOG_LOG_LEVEL", "WARNING")  # Console threshold
    LOG_KEEP: int = 20                  # Newest run files kept in LOGS_DIR

    # --- Admin ---
    ADMIN_PASSWORD: str = os.getenv("CATALOG_ADMIN_PASSWORD", "admin123")
