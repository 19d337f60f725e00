from typing import List, Literal, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

class AppConfig(BaseSettings):
    """Application configuration using Pydantic BaseSettings.

    Loads configuration from environment variables and .env file (if present).
    Fields are type-checked and validated. Defaults are provided where appropriate.
    """
    # Application
    app_env: str = "local"
    log_level: str = "DEBUG"
    log_serialize: bool = False

    # Storage
    data_dir: str = "local_storage"
    storage_backend: Literal["sqlite", "json"] = "sqlite"
    items_key: str = "abcLogisticsDB"
    counter_key: str = "abcLogisticsNextId"
    legacy_key: str = "abcLogisticsInventory"

    # Items
    id_prefix: str = "ABC"
    categories: List[str] = ["Equipment", "Supplies", "Raw Materials", "Finished Goods"]

    # UI settings
    recent_activity_limit: int = 5
    chart_label_max: int = 20
    low_quantity_threshold: int = 5

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
