"""Application configuration loaded from environment variables."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Global application settings."""

    reports_root: str = "data/reports"
    output_dir: str = "result"
    debug_text_dir: str = "debug"
    write_debug_text: bool = False

    default_user_id: Optional[str] = Field(
        default=None, description="Wooma user that owns imported properties."
    )
    default_property_id: Optional[str] = None
    default_report_type_id: Optional[str] = None

    json_indent: int = 4
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def reports_root_path(self) -> Path:
        return Path(self.reports_root)

    @property
    def output_dir_path(self) -> Path:
        return Path(self.output_dir)

    @property
    def debug_text_dir_path(self) -> Path:
        return Path(self.debug_text_dir)


settings = Settings()
