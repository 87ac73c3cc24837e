"""
Static channel and category schema.

Which metric fields a channel accepts (and in which order the data-entry form
shows them), and which channels make up each category.
"""

from typing import Dict, Iterable, List, Tuple
from models.base import Category, Channel, MetricField

F = MetricField

_PAID_SOCIAL_METRICS = (
    F.START_DATE, F.END_DATE, F.SPEND, F.REACH, F.IMPRESSIONS, F.CPM,
    F.LINK_CLICKS, F.LINK_CTR, F.LINK_CPC, F.LEADS, F.CLOSING, F.CPR,
    F.REVENUE, F.ROAS, F.NOTED,
)

CHANNEL_METRICS: Dict[Channel, Tuple[MetricField, ...]] = {
    Channel.META_ADS: _PAID_SOCIAL_METRICS,
    Channel.GOOGLE_ADS: (
        F.START_DATE, F.END_DATE, F.SPEND, F.IMPRESSIONS, F.CLICKS, F.CPC,
        F.CTR, F.LEADS, F.CLOSING, F.REVENUE, F.ROAS,
    ),
    Channel.TIKTOK_ADS: _PAID_SOCIAL_METRICS,
    Channel.FACEBOOK: (
        F.START_DATE, F.END_DATE, F.FOLLOWERS, F.VIDEO, F.REELS, F.IMAGES,
        F.CAROUSEL, F.CONTENT, F.REACH, F.PLAYS, F.COMMENTS, F.SHARES,
        F.TOTAL_ENGAGEMENT, F.LEADS, F.CLOSING, F.BUDGET, F.REVENUE, F.NOTED,
    ),
    Channel.INSTAGRAM: (
        F.START_DATE, F.END_DATE, F.FOLLOWERS, F.VIDEO, F.REELS, F.IMAGES,
        F.CAROUSEL, F.CONTENT, F.REACH, F.IMPRESSIONS, F.LIKES, F.COMMENTS,
        F.SHARES, F.FOLLOWING, F.SAVES, F.TOTAL_ENGAGEMENT, F.LEADS, F.CLOSING,
        F.REVENUE, F.BUDGET, F.NOTED,
    ),
    Channel.TIKTOK: (
        F.START_DATE, F.END_DATE, F.FOLLOWERS, F.VIDEO, F.REELS, F.IMAGES,
        F.CAROUSEL, F.CONTENT, F.REACH, F.IMPRESSIONS, F.LIKES, F.COMMENTS,
        F.SHARES, F.FOLLOWING, F.SAVES, F.INTERACTIONS, F.LEADS, F.CLOSING,
        F.REVENUE, F.BUDGET, F.NOTED,
    ),
    Channel.YOUTUBE: (
        F.START_DATE, F.END_DATE, F.SUBSCRIBERS, F.VIDEOS, F.SHORTS, F.VIEWS,
        F.WATCH_TIME, F.ENGAGEMENT, F.LEADS, F.CLOSING, F.REVENUE, F.NOTED,
    ),
    Channel.WEBSITE: (
        F.START_DATE, F.END_DATE, F.SESSIONS, F.USERS, F.PAGEVIEWS,
        F.BOUNCE_RATE, F.LEADS, F.CLOSING, F.REVENUE, F.NOTED,
    ),
}

CATEGORY_CHANNELS: Dict[Category, Tuple[Channel, ...]] = {
    Category.ORGANIC: (
        Channel.FACEBOOK, Channel.INSTAGRAM, Channel.TIKTOK, Channel.YOUTUBE, Channel.WEBSITE,
    ),
    Category.PAID_ADS: (
        Channel.META_ADS, Channel.GOOGLE_ADS, Channel.TIKTOK_ADS,
    ),
}

# Free-text fields; never coerced to numbers
TEXT_METRIC_FIELDS = frozenset({F.START_DATE, F.END_DATE, F.NOTED})

_CHANNEL_CATEGORY: Dict[Channel, Category] = {
    channel: category
    for category, channels in CATEGORY_CHANNELS.items()
    for channel in channels
}


def metric_fields_for(channel) -> List[str]:
    """Ordered metric field names for a channel, or an empty list if it has no schema"""
    try:
        fields = CHANNEL_METRICS[Channel(channel)]
    except ValueError:
        return []
    return [field.value for field in fields]


def channels_for(category) -> Tuple[Channel, ...]:
    return CATEGORY_CHANNELS[Category(category)]


def category_of(channel) -> Category:
    return _CHANNEL_CATEGORY[Channel(channel)]


def is_text_metric(name: str) -> bool:
    return name in {field.value for field in TEXT_METRIC_FIELDS}


def unknown_metric_keys(channel, keys: Iterable[str]) -> List[str]:
    """Keys that are not part of the channel's configured metric fields"""
    allowed = set(metric_fields_for(channel))
    return [key for key in keys if key not in allowed]
