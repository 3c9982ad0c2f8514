from typing import List, Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class AppConfig(BaseSettings):
    """Application configuration using Pydantic BaseSettings.

    Loads configuration from environment variables and .env file (if present).
    Fields are type-checked and validated. Defaults are provided where appropriate.
    """
    # Storefront REST API
    api_base_url: str = "http://localhost:5000"
    admin_orders_path: str = "/api/admin/orders"
    api_user_id: Optional[str] = None
    api_firebase_uid: Optional[str] = None
    request_timeout: Optional[float] = None

    # Firebase / Firestore
    firebase_credentials_path: Optional[str] = None
    firebase_project_id: Optional[str] = None
    orders_collection: str = "orders"

    # Sources tried in order until one succeeds
    order_sources: List[str] = ["api", "firestore"]

    # Application
    app_env: str = "local"
    log_level: str = "DEBUG"
    log_file: Optional[str] = None

    # UI settings
    recent_orders_limit: int = Field(default=5, ge=0)
    top_products_limit: int = Field(default=5, ge=0)

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

_config: Optional[AppConfig] = None

def get_config() -> AppConfig:
    """Return the AppConfig instance (singleton pattern)."""
    global _config
    if _config is None:
        _config = AppConfig()
    return _config

def set_config_for_test(**kwargs):
    """For testing only: override the AppConfig instance with new values."""
    global _config
    _config = AppConfig(**kwargs)
