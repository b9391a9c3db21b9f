"""Request option structures for the subscription routes.

Every optional field defaults to ``None``, which the encoder treats as
"absent": a defaulted field never produces a wire key.
"""

from datetime import datetime
from decimal import Decimal
from typing import Annotated, Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Strict, StrictStr

# Either an absolute time or a sentinel string such as "now".
TrialEnd = Union[Annotated[datetime, Strict()], StrictStr]


class _Params(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class CreateSubscriptionParams(_Params):
    customer: str
    application_fee_percent: Optional[Decimal] = None
    billing: Optional[str] = None
    billing_cycle_anchor: Optional[datetime] = None
    cancel_at_period_end: Optional[bool] = None
    coupon: Optional[str] = None
    days_until_due: Optional[int] = None
    items: Optional[list[dict[str, Any]]] = None
    metadata: Optional[dict[str, str]] = None
    prorate: Optional[bool] = None
    tax_percent: Optional[Decimal] = None
    trial_end: Optional[TrialEnd] = None
    trial_from_plan: Optional[bool] = None
    trial_period_days: Optional[int] = None
    off_session: Optional[bool] = None


class UpdateSubscriptionParams(_Params):
    application_fee_percent: Optional[Decimal] = None
    billing: Optional[str] = None
    billing_cycle_anchor: Optional[str] = None  # "now" / "unchanged", sent verbatim
    cancel_at_period_end: Optional[bool] = None
    coupon: Optional[str] = None
    days_until_due: Optional[int] = None
    items: Optional[list[dict[str, Any]]] = None
    metadata: Optional[dict[str, str]] = None
    prorate: Optional[bool] = None
    proration_date: Optional[datetime] = None
    tax_percent: Optional[Decimal] = None
    trial_end: Optional[TrialEnd] = None
    trial_from_plan: Optional[bool] = None


class CancelSubscriptionParams(_Params):
    invoice_now: Optional[bool] = None
    prorate: Optional[bool] = None


class LegacyCancelSubscriptionParams(_Params):
    at_period_end: bool
