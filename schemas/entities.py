"""
Pydantic schemas for the persisted dashboard entities with validation
"""

from pydantic import BaseModel, Field, validator
from typing import Optional, Dict, Union
import datetime
import logging
import math
import re

from analytics.registry import channels_for, is_text_metric, unknown_metric_keys
from core.config import settings
from models.base import Role, Category, Channel, Objective, TaskStatus

logger = logging.getLogger(__name__)

MetricValue = Union[float, str]

# Plain ASCII decimal with optional sign, fraction and exponent
NUMBER_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_metric_number(value) -> Optional[float]:
    """Finite float for a numeric-looking value, else None"""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = str(value).strip()
        if not NUMBER_PATTERN.fullmatch(text):
            return None
        number = float(text)
    return number if math.isfinite(number) else None


class User(BaseModel):
    """Dashboard account. Passwords are stored and compared in plaintext."""
    id: str = Field(..., min_length=1)
    username: str = Field(..., min_length=1, max_length=100)
    password: Optional[str] = None
    role: Role

    @validator("username")
    def clean_username(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Username cannot be empty after stripping")
        return v


class MarketingRecordBase(BaseModel):
    """
    Fields shared by stored records and data-entry payloads.

    Ensures:
    - The channel belongs to the record's category
    - Metric values are resolved once: text fields stay text, everything
      else becomes a float when it parses as a finite number
    """
    date: datetime.date
    category: Category
    channel: Channel
    objective: Objective = Objective.AWARENESS
    metrics: Dict[str, MetricValue] = Field(default_factory=dict)

    @validator("channel")
    def channel_matches_category(cls, v, values):
        category = values.get("category")
        if category is not None and v not in channels_for(category):
            raise ValueError(f"Channel '{v.value}' does not belong to category '{category.value}'")
        return v

    @validator("metrics", pre=True)
    def resolve_metric_values(cls, v):
        """Coerce numeric-looking values to float, keep the rest as text"""
        if v is None:
            return {}
        if not isinstance(v, dict):
            raise ValueError("metrics must be a mapping of field name to value")

        resolved = {}
        for key, raw in v.items():
            name = str(key).strip()
            if not name:
                continue
            if is_text_metric(name):
                resolved[name] = "" if raw is None else str(raw)
                continue
            number = parse_metric_number(raw)
            resolved[name] = number if number is not None else ("" if raw is None else str(raw))
        return resolved


class MarketingRecord(MarketingRecordBase):
    """One logged marketing-performance entry"""
    id: str = Field(..., min_length=1)
    user_id: str


class MarketingRecordCreate(MarketingRecordBase):
    """
    Data-entry payload.

    Metric keys outside the channel's schema are tolerated with a warning,
    or rejected when STRICT_METRIC_KEYS is enabled.
    """

    @validator("metrics")
    def check_metric_keys(cls, v, values):
        channel = values.get("channel")
        if channel is None:
            return v

        unknown = unknown_metric_keys(channel, v.keys())
        if unknown:
            if settings.STRICT_METRIC_KEYS:
                raise ValueError(
                    f"Metric fields not configured for {channel.value}: {', '.join(unknown)}"
                )
            logger.warning(f"Metric fields not configured for {channel.value}: {unknown}")
        return v


class Task(BaseModel):
    """Task board card"""
    id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1, max_length=500)
    label: str = "Task"
    content: str = ""
    status: TaskStatus = TaskStatus.TODO
