import logging
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_LAYOUT_FILE = "devices.json"


class DeviceModelSettings(BaseSettings):
    """Settings for loading and publishing device models."""

    layout_path: Path = Path(DEFAULT_LAYOUT_FILE)
    raise_errors: bool = True
    strict_references: bool = False
    verbosity: int = logging.WARNING
    model_config = SettingsConfigDict(
        env_prefix="MTC_",
        env_nested_delimiter="__",
        extra="ignore",
    )
