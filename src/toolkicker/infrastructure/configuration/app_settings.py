from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from toolkicker.core.application.stores.storage_keys import DEFAULT_KEY_PREFIX, StorageKeys


class AppSettings(BaseSettings):
    # App Config
    app_name: str = "Toolkicker"
    log_level: str = "INFO"
    log_format: str | None = Field(default=None, description="json or console; unset defers to LOG_FORMAT/APP_ENV")

    # Storage
    runtime_data_dir: Path = Field(default=Path("runtime_data"))
    storage_file_name: str = Field(default="toolkicker_store.json")
    storage_key_prefix: str = Field(
        default=DEFAULT_KEY_PREFIX, description="Namespace prepended to every storage key"
    )

    model_config = SettingsConfigDict(env_prefix="TOOLKICKER_", env_file=None, extra="ignore")

    @property
    def storage_file_path(self) -> Path:
        return self.runtime_data_dir / self.storage_file_name

    @property
    def storage_keys(self) -> StorageKeys:
        return StorageKeys.with_prefix(self.storage_key_prefix)
