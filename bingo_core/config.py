"""Environment-based configuration."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    input_path: str
    log_level: str


def get_settings() -> Settings:
    return Settings(
        input_path=os.getenv("BINGO_INPUT", os.path.join("files", "input.txt")),
        log_level=os.getenv("BINGO_LOG_LEVEL", "WARNING").upper().strip(),
    )


def configure_logging(level_name: str) -> None:
    level = getattr(logging, str(level_name).upper(), logging.WARNING)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
