"""
Form/query parameter encoding for the Stripe API.

Stripe takes ``application/x-www-form-urlencoded`` bodies (and query
strings) with nested structures spelled out as bracketed keys::

    items[0][price]=price_123
    metadata[plan]=gold

Each operation has a dedicated ``encode_*`` function that walks its option
structure field by field and appends ``(wire_key, value)`` pairs to an
``EncodedBody``. Omitted (``None``) fields never produce a key, datetimes
become Unix timestamps, and lists/mappings are flattened until only scalars
remain.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple, Union

from stripe_subscriptions.schemas.subscription import (
    CancelSubscriptionParams,
    CreateSubscriptionParams,
    LegacyCancelSubscriptionParams,
    UpdateSubscriptionParams,
)
from stripe_subscriptions.utils import to_unix_timestamp

Scalar = Union[str, bool, int, float, Decimal]

_SCALAR_TYPES = (str, bool, int, float, Decimal)


def wire_value(value: Scalar) -> str:
    """Render a scalar the way Stripe reads it in a form body."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Decimal):
        return format(value, "f")
    return str(value)


class EncodedBody:
    """Ordered, flat list of ``(wire_key, scalar)`` pairs."""

    def __init__(self) -> None:
        self._pairs: List[Tuple[str, Scalar]] = []

    # -- builders --

    def add(self, key: str, value: Optional[Scalar]) -> "EncodedBody":
        """Append a scalar as-is; ``None`` is skipped."""
        if value is None:
            return self
        if not isinstance(value, _SCALAR_TYPES):
            raise TypeError(
                f"{key}: expected a scalar, got {type(value).__name__}"
            )
        self._pairs.append((key, value))
        return self

    def add_timestamp(self, key: str, value: Optional[datetime]) -> "EncodedBody":
        if value is None:
            return self
        if not isinstance(value, datetime):
            raise TypeError(f"{key}: expected datetime, got {type(value).__name__}")
        self._pairs.append((key, to_unix_timestamp(value)))
        return self

    def add_flattened(self, prefix: str, value: Any) -> "EncodedBody":
        """Flatten *value* under *prefix* using bracket notation.

        Mappings keep their iteration order, lists use the element position
        as the index. Datetimes anywhere in the structure are converted to
        timestamps; ``None`` leaves are dropped.
        """
        if value is None:
            return self
        if isinstance(value, Mapping):
            for key, sub in value.items():
                self.add_flattened(f"{prefix}[{key}]", sub)
        elif isinstance(value, (list, tuple)):
            for index, sub in enumerate(value):
                self.add_flattened(f"{prefix}[{index}]", sub)
        elif isinstance(value, datetime):
            self.add_timestamp(prefix, value)
        else:
            self.add(prefix, value)
        return self

    # -- views --

    def pairs(self) -> List[Tuple[str, Scalar]]:
        return list(self._pairs)

    def as_dict(self) -> Dict[str, Scalar]:
        return dict(self._pairs)

    def as_form(self) -> List[Tuple[str, str]]:
        """String pairs ready for an urlencoded body or query string."""
        return [(key, wire_value(value)) for key, value in self._pairs]

    def keys(self) -> List[str]:
        return [key for key, _ in self._pairs]

    def __iter__(self) -> Iterator[Tuple[str, Scalar]]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def __bool__(self) -> bool:
        return bool(self._pairs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EncodedBody):
            return NotImplemented
        return self._pairs == other._pairs

    def __repr__(self) -> str:
        return f"EncodedBody({self._pairs!r})"


# ---------------------------------------------------------------------------
# Field helpers shared by create/update
# ---------------------------------------------------------------------------


def _add_trial_end(body: EncodedBody, value: Union[datetime, str, None]) -> None:
    # datetime -> timestamp, string sentinel (e.g. "now") verbatim
    if value is None:
        return
    if isinstance(value, datetime):
        body.add_timestamp("trial_end", value)
    elif isinstance(value, str):
        body.add("trial_end", value)
    else:
        raise TypeError(
            f"trial_end: expected datetime or str, got {type(value).__name__}"
        )


def _add_items(body: EncodedBody, items: Optional[List[Mapping[str, Any]]]) -> None:
    if items is None:
        return
    for index, item in enumerate(items):
        for key, value in item.items():
            body.add_flattened(f"items[{index}][{key}]", value)


def _add_metadata(body: EncodedBody, metadata: Optional[Mapping[str, str]]) -> None:
    if metadata is None:
        return
    for key, value in metadata.items():
        body.add(f"metadata[{key}]", value)


# ---------------------------------------------------------------------------
# Per-operation encoders
# ---------------------------------------------------------------------------


def encode_create(params: CreateSubscriptionParams) -> EncodedBody:
    body = EncodedBody()
    body.add("customer", params.customer)
    body.add("application_fee_percent", params.application_fee_percent)
    body.add("billing", params.billing)
    body.add_timestamp("billing_cycle_anchor", params.billing_cycle_anchor)
    body.add("cancel_at_period_end", params.cancel_at_period_end)
    body.add("coupon", params.coupon)
    body.add("days_until_due", params.days_until_due)
    _add_items(body, params.items)
    _add_metadata(body, params.metadata)
    body.add("prorate", params.prorate)
    body.add("tax_percent", params.tax_percent)
    _add_trial_end(body, params.trial_end)
    body.add("trial_from_plan", params.trial_from_plan)
    body.add("trial_period_days", params.trial_period_days)
    body.add("off_session", params.off_session)
    return body


def encode_update(params: UpdateSubscriptionParams) -> EncodedBody:
    body = EncodedBody()
    body.add("application_fee_percent", params.application_fee_percent)
    body.add("billing", params.billing)
    # raw string on update ("now" / "unchanged"), not a timestamp
    body.add("billing_cycle_anchor", params.billing_cycle_anchor)
    body.add("cancel_at_period_end", params.cancel_at_period_end)
    body.add("coupon", params.coupon)
    body.add("days_until_due", params.days_until_due)
    _add_items(body, params.items)
    _add_metadata(body, params.metadata)
    body.add("prorate", params.prorate)
    body.add_timestamp("proration_date", params.proration_date)
    body.add("tax_percent", params.tax_percent)
    _add_trial_end(body, params.trial_end)
    body.add("trial_from_plan", params.trial_from_plan)
    return body


def encode_cancel(params: CancelSubscriptionParams) -> EncodedBody:
    body = EncodedBody()
    body.add("invoice_now", params.invoice_now)
    body.add("prorate", params.prorate)
    return body


def encode_legacy_cancel(params: LegacyCancelSubscriptionParams) -> EncodedBody:
    """Single fixed key, independent of the general field rules."""
    body = EncodedBody()
    body.add("at_period_end", params.at_period_end)
    return body


def encode_query(filters: Optional[Mapping[str, Any]]) -> EncodedBody:
    """Flatten a free-form list filter, e.g. ``{"created": {"gte": dt}}``."""
    query = EncodedBody()
    if not filters:
        return query
    for key, value in filters.items():
        query.add_flattened(key, value)
    return query
