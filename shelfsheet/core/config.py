"""Core engine configuration.

Core config is side-effect free: it does not load dotenv files.
"""

import os
from dataclasses import dataclass

from .codec.writer import DEFAULT_DATE_NUMBER_FORMAT


@dataclass(frozen=True)
class CoreConfig:
    strict: bool = False
    date_number_format: str = DEFAULT_DATE_NUMBER_FORMAT
    sheet_title: str | None = None


def config_from_env(*, strict: bool = False) -> CoreConfig:
    return CoreConfig(
        strict=strict,
        date_number_format=os.getenv("SHELFSHEET_DATE_FORMAT") or DEFAULT_DATE_NUMBER_FORMAT,
        sheet_title=os.getenv("SHELFSHEET_SHEET_TITLE") or None,
    )


__all__ = ["CoreConfig", "config_from_env"]
