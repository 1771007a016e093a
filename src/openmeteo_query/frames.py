"""Tabular views of decoded forecast blocks."""
from __future__ import annotations
from typing import Optional
import pandas as pd
from pydantic import BaseModel
from .models import WeatherResult


def _block_frame(block: Optional[BaseModel]) -> pd.DataFrame:
    if block is None:
        return pd.DataFrame()
    # Drop variables that were not returned so columns stay aligned with "time"
    columns = {name: values for name, values in block.model_dump().items() if values}
    if not columns.get("time"):
        return pd.DataFrame()
    frame = pd.DataFrame(columns)
    return frame.rename(columns={"time": "date"})


def hourly_frame(result: WeatherResult) -> pd.DataFrame:
    """Hourly block as a DataFrame, one row per hour; empty if not requested."""
    return _block_frame(result.hourly)


def daily_frame(result: WeatherResult) -> pd.DataFrame:
    """Daily block as a DataFrame, one row per day; empty if not requested."""
    return _block_frame(result.daily)


__all__ = ["hourly_frame", "daily_frame"]
