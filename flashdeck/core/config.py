from pydantic_settings import BaseSettings
import os
from pathlib import Path

# Try to load .env file explicitly before creating Settings
try:
    from dotenv import load_dotenv
    import logging
    _logger = logging.getLogger(__name__)

    # Look for .env in the project root (parent of the flashdeck package)
    project_dir = Path(__file__).parent.parent.parent
    env_path = project_dir / ".env"

    if env_path.exists():
        load_dotenv(env_path, override=False)
        _logger.info(f"Loaded .env file from: {env_path}")
    else:
        # Fallback to current directory
        current_env = Path(".env")
        if current_env.exists():
            load_dotenv(current_env, override=False)
            _logger.info(f"Loaded .env file from: {current_env.absolute()}")
        else:
            _logger.debug(f".env file not found at {env_path} or {current_env.absolute()}")
except ImportError:
    # dotenv not installed, will rely on environment variables
    import logging
    _logger = logging.getLogger(__name__)
    _logger.warning("python-dotenv not installed. Install it with: pip install python-dotenv")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    database_url: str = ""

    # API
    api_prefix: str = "/api"

    # CORS
    cors_origins: list[str] = ["*"]

    # Shared token expected in the `uuid` query parameter (empty disables the check)
    access_token: str = ""

    # Owner of every deck served by this instance
    default_user_id: int = 1

    # Review scheduling
    daily_review_quota: int = 9
    active_deck_cache_size: int = 128

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"

    def __init__(self, **kwargs):
        # DATABASE_URL is provided uppercase by most hosts
        if not kwargs.get("database_url"):
            kwargs["database_url"] = os.getenv("DATABASE_URL", "")
        # The shared token has always been exported as UUID
        if not kwargs.get("access_token") and os.getenv("UUID"):
            kwargs["access_token"] = os.getenv("UUID")
        super().__init__(**kwargs)

    @property
    def sqlalchemy_url(self) -> str:
        """Database URL with the postgres:// scheme rewritten for SQLAlchemy."""
        if self.database_url.startswith("postgres://"):
            return self.database_url.replace("postgres://", "postgresql://", 1)
        return self.database_url


# Create settings instance
settings = Settings()

# Validate required DATABASE_URL
if not settings.database_url:
    raise ValueError("DATABASE_URL environment variable is required")
