"""
Channel/category schema endpoint for rendering data-entry forms
"""

from fastapi import APIRouter
from analytics.registry import CATEGORY_CHANNELS, CHANNEL_METRICS, metric_fields_for
from schemas.api import ChannelSchemaResponse

router = APIRouter(prefix="/schema", tags=["Schema"])


@router.get("/channels", response_model=ChannelSchemaResponse)
def get_channel_schema():
    return ChannelSchemaResponse(
        channel_metrics={channel: metric_fields_for(channel) for channel in CHANNEL_METRICS},
        category_channels={category: list(channels) for category, channels in CATEGORY_CHANNELS.items()},
    )
