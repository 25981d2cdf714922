from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    # Application
    APP_NAME: str = "Hospital Registry"
    VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Hospital
    HOSPITAL_NAME: str = "Hopital"
    APPOINTMENT_PRICE: float = 25.0

    # CORS
    ALLOWED_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:8080", "http://testserver"]

    @property
    def get_log_level(self) -> str:
        """Return the log level name in the form logging expects"""
        return self.LOG_LEVEL.upper()

    class Config:
        env_file = ".env"
        case_sensitive = True

# Create settings instance
settings = Settings()
