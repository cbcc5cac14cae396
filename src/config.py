"""Application settings loaded from environment variables."""

import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _env_file() -> str | None:
    if os.getenv("PYTEST_CURRENT_TEST"):
        return None
    return ".env"


class Settings(BaseSettings):
    """ToneHone configuration. All values come from environment variables."""

    # Tone sliders
    tone_min: float = Field(default=1.0)
    tone_max: float = Field(default=10.0)

    # Preset applied to the seeded conversation by the demo entry point ("" keeps the seed tone)
    default_preset: str = Field(default="")

    # Clipboard
    clipboard_history_size: int = Field(default=20)

    # Logging
    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(env_file=_env_file(), env_file_encoding="utf-8")

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        if os.getenv("PYTEST_CURRENT_TEST"):
            return (init_settings,)
        return (init_settings, env_settings, dotenv_settings, file_secret_settings)

    def tone_range(self) -> tuple[float, float]:
        """Return (low, high) slider bounds, swapped if configured backwards."""
        low, high = self.tone_min, self.tone_max
        if low > high:
            low, high = high, low
        return low, high


settings = Settings()
