"""
Role-based access policy.

A role maps to a fixed capability set: the top-level views it may open and
the categories it may log records under. The gating is advisory; anyone with
direct store access can still write records in any category.
"""

from typing import Dict, Tuple
from pydantic import BaseModel

from analytics.registry import channels_for
from models.base import Role, Category, Channel, View

OPERATIONAL_VIEWS: Tuple[View, ...] = (View.DASHBOARD, View.DATA, View.TASK)


class Capability(BaseModel):
    """What a role may see and create"""
    role: Role
    visible_views: Tuple[View, ...]
    allowed_categories: Tuple[Category, ...]

    class Config:
        frozen = True


ROLE_CAPABILITIES: Dict[Role, Capability] = {
    Role.ADMIN: Capability(
        role=Role.ADMIN,
        visible_views=OPERATIONAL_VIEWS + (View.MANAGEMENT,),
        allowed_categories=(Category.ORGANIC, Category.PAID_ADS),
    ),
    Role.ADS_SPECIALIST: Capability(
        role=Role.ADS_SPECIALIST,
        visible_views=OPERATIONAL_VIEWS,
        allowed_categories=(Category.PAID_ADS,),
    ),
    Role.SOCIAL_MEDIA_SPECIALIST: Capability(
        role=Role.SOCIAL_MEDIA_SPECIALIST,
        visible_views=OPERATIONAL_VIEWS,
        allowed_categories=(Category.ORGANIC,),
    ),
}


def capabilities_for(role) -> Capability:
    return ROLE_CAPABILITIES[Role(role)]


def can_view(capability: Capability, view) -> bool:
    return View(view) in capability.visible_views


def can_create_in(capability: Capability, category) -> bool:
    return Category(category) in capability.allowed_categories


def allowed_channels(capability: Capability) -> Tuple[Channel, ...]:
    """Channels of every allowed category, in registry order"""
    channels: Tuple[Channel, ...] = ()
    for category in capability.allowed_categories:
        channels += channels_for(category)
    return channels


def default_entry_for(role) -> Tuple[Category, Channel]:
    """Category and channel the data-entry form starts on"""
    if Role(role) == Role.ADS_SPECIALIST:
        return Category.PAID_ADS, Channel.META_ADS
    return Category.ORGANIC, Channel.FACEBOOK
