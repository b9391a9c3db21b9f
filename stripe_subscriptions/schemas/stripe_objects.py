"""Decoded Stripe response objects.

Only the fields callers commonly read are declared; everything else the API
returns is kept as extra attributes.
"""

from datetime import datetime
from typing import Annotated, Any, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict

from stripe_subscriptions.utils import from_unix_timestamp


def coerce_timestamp_to_datetime(ts: Any) -> Any:
    """Converts a Unix timestamp (in seconds) to a datetime object."""
    if isinstance(ts, int) and not isinstance(ts, bool):
        return from_unix_timestamp(ts)
    return ts


Timestamp = Annotated[datetime, BeforeValidator(coerce_timestamp_to_datetime)]


class StripeObject(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    object: str


class Subscription(StripeObject):
    object: str = "subscription"
    customer: Optional[str] = None
    status: Optional[str] = None
    billing: Optional[str] = None
    cancel_at_period_end: Optional[bool] = None
    created: Optional[Timestamp] = None
    current_period_start: Optional[Timestamp] = None
    current_period_end: Optional[Timestamp] = None
    trial_end: Optional[Timestamp] = None
    metadata: dict[str, str] = {}


class SubscriptionList(BaseModel):
    model_config = ConfigDict(extra="allow")

    object: str = "list"
    data: list[Subscription] = []
    has_more: bool = False
    url: Optional[str] = None


class DeletedObject(StripeObject):
    id: Optional[str] = None  # deleted discounts carry no id
    deleted: bool
