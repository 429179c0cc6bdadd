from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional
from pathlib import Path

# Project root is two levels up from backend/app/
PROJECT_ROOT = Path(__file__).resolve().parents[2]


class Settings(BaseSettings):
    # Financial Modeling Prep (upstream provider)
    fmp_api_key: Optional[str] = None
    fmp_base_url: str = "https://financialmodelingprep.com/stable"
    fmp_timeout_seconds: float = 15.0

    # Comma-separated list of origins allowed to call the proxy endpoints
    allowed_origins: str = "http://localhost:3000"

    # Database Configuration
    database_url: str = "sqlite+aiosqlite:///./industrial_yield.db"
    db_echo: bool = False

    # Dashboard defaults
    default_percentage_range: float = 10.0

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=str(PROJECT_ROOT / '.env'),
        env_file_encoding='utf-8',
        extra='ignore'
    )

    @property
    def allowed_origin_list(self) -> List[str]:
        origins = [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]
        return origins or ["http://localhost:3000"]


def get_settings() -> Settings:
    """Get fresh settings instance - no caching to avoid stale API keys."""
    return Settings()
