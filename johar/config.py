"""
Johar Backend Configuration
Loads settings from environment variables
"""

import os
from pathlib import Path
from typing import List
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Settings:
    """Application settings loaded from environment"""

    # Database
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./johar.db")
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

    # API
    BACKEND_PORT: int = int(os.getenv("BACKEND_PORT", "8000"))
    FRONTEND_URL: str = os.getenv("FRONTEND_URL", "http://localhost:3000")

    # Static reference data (sites.json, market_items.json)
    SEED_DATA_DIR: str = os.getenv(
        "SEED_DATA_DIR",
        str(Path(__file__).resolve().parent.parent / "seed_data")
    )

    # Language tag handed to the speech output along with chat replies
    DEFAULT_SPEECH_LANG: str = os.getenv("DEFAULT_SPEECH_LANG", "en-IN")

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @property
    def cors_origins_list(self) -> List[str]:
        """Get CORS origins as a list"""
        return [origin.strip() for origin in self.FRONTEND_URL.split(",")]

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")


# Global settings instance
settings = Settings()
