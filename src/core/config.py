"""Application settings, read from the environment."""

import os
from dataclasses import dataclass, field


def _origins() -> list[str]:
    return os.getenv("QUIRKY_CORS_ORIGINS", "*").split(",")


@dataclass(frozen=True)
class Settings:
    # Board spans rows/columns 0..board_size-1, play starts in the middle
    board_size: int = int(os.getenv("QUIRKY_BOARD_SIZE", "181"))
    chat_lines: int = int(os.getenv("QUIRKY_CHAT_LINES", "1000"))
    log_level: str = os.getenv("QUIRKY_LOG_LEVEL", "INFO")
    cors_origins: list[str] = field(default_factory=_origins)
    port: int = int(os.getenv("PORT", "8010"))


settings = Settings()
