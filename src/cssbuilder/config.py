from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BuilderConfig:
    unique_id: bool = False  # cap id at one occurrence like element
    logger_name: str = "cssbuilder"
