from pydantic_settings import BaseSettings
from typing import List
import os

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///checklist.db"
    BACKEND_CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]
    # Implicit end of the last set of the night, in the 24+ hour encoding (1:00 AM)
    CLOSING_TIME: str = "25:00"
    ADVANCEMENT_RECIPIENT: str = "marley@blackboxdenver.co"
    API_BASE_URL: str = "http://localhost:8000/api"
    REQUEST_TIMEOUT: float = 10.0
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))), ".env")

settings = Settings()
