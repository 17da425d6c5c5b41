"""
Per-exercise weight series used for trend analysis.
"""

from typing import List

from pydantic import Field

from domain.models.base import SCHEMA_VERSION, CamelModel


class WeightHistoryPoint(CamelModel):
    weight: float
    date: str


class WeightHistory(CamelModel):
    history: List[WeightHistoryPoint] = Field(default_factory=list)
    schema_version: int = SCHEMA_VERSION
