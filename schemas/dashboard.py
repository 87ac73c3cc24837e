"""
Pydantic schemas for dashboard filtering and aggregation results
"""

from pydantic import BaseModel, Field, validator
from typing import Optional, Dict, List
import datetime

from models.base import Category, Channel

ALL = "all"


class RecordFilter(BaseModel):
    """
    Category/channel filter of the dashboard.

    None (or "all") means no constraint on that dimension. Date bounds are
    inclusive.
    """
    category: Optional[Category] = None
    channel: Optional[Channel] = None
    date_from: Optional[datetime.date] = None
    date_to: Optional[datetime.date] = None

    @validator("category", "channel", "date_from", "date_to", pre=True)
    def all_means_unconstrained(cls, v):
        if v is None:
            return None
        if isinstance(v, str) and v.strip().lower() in ("", ALL):
            return None
        return v

    def matches(self, record) -> bool:
        if self.category is not None and record.category != self.category:
            return False
        if self.channel is not None and record.channel != self.channel:
            return False
        if self.date_from is not None and record.date < self.date_from:
            return False
        if self.date_to is not None and record.date > self.date_to:
            return False
        return True

    def applied(self) -> Dict[str, str]:
        """Constrained dimensions only, for logging and responses"""
        return {
            k: (v.value if hasattr(v, "value") else v.isoformat())
            for k, v in {
                "category": self.category,
                "channel": self.channel,
                "date_from": self.date_from,
                "date_to": self.date_to,
            }.items() if v is not None
        }


class SummaryTotals(BaseModel):
    """Summary cards of the dashboard"""
    record_count: int = 0
    total_spend: float = 0.0
    total_revenue: float = 0.0
    total_leads: float = 0.0
    total_reach: float = 0.0
    roas: Optional[float] = Field(None, description="Revenue divided by spend, when spend is positive")


class TimeSeriesPoint(BaseModel):
    """Revenue and spend summed over one calendar day"""
    date: datetime.date
    revenue: float = 0.0
    spend: float = 0.0


class DashboardSnapshot(BaseModel):
    """Everything the dashboard view renders for one filter"""
    filters_applied: Dict[str, str] = Field(default_factory=dict)
    summary: SummaryTotals
    channel_distribution: Dict[Channel, int] = Field(default_factory=dict)
    time_series: List[TimeSeriesPoint] = Field(default_factory=list)
