"""
Subscription routes.

Each method resolves its endpoint, encodes its options and hands both to the
transport. One call is one outbound request; nothing here retries.
"""

from __future__ import annotations

import logging
import warnings
from typing import TYPE_CHECKING, Any, Mapping, Optional

from stripe_subscriptions.schemas.stripe_objects import (
    DeletedObject,
    Subscription,
    SubscriptionList,
)
from stripe_subscriptions.schemas.subscription import (
    CancelSubscriptionParams,
    CreateSubscriptionParams,
    LegacyCancelSubscriptionParams,
    UpdateSubscriptionParams,
)
from stripe_subscriptions.services.stripe_api.encoding import (
    encode_cancel,
    encode_create,
    encode_legacy_cancel,
    encode_query,
    encode_update,
)
from stripe_subscriptions.services.stripe_api.endpoints import (
    SubscriptionOperation,
    resolve_endpoint,
)

if TYPE_CHECKING:
    from stripe_subscriptions.services.stripe_api.client import BaseAPIClient

logger = logging.getLogger(__name__)


class SubscriptionAPI:
    """Subscription endpoints."""

    def __init__(self, client: BaseAPIClient):
        self.client = client

    async def create(self, params: CreateSubscriptionParams) -> Subscription:
        """Create a subscription for ``params.customer``.

        https://stripe.com/docs/api/subscriptions/create
        """
        endpoint = resolve_endpoint(SubscriptionOperation.CREATE)
        data = await self.client.send(
            endpoint.method, endpoint.path, body=encode_create(params)
        )
        return Subscription.model_validate(data)

    async def retrieve(self, subscription_id: str) -> Subscription:
        endpoint = resolve_endpoint(SubscriptionOperation.RETRIEVE, subscription_id)
        data = await self.client.send(endpoint.method, endpoint.path)
        return Subscription.model_validate(data)

    async def update(
        self,
        subscription_id: str,
        params: Optional[UpdateSubscriptionParams] = None,
    ) -> Subscription:
        """Update a subscription. ``params=None`` sends an empty body.

        https://stripe.com/docs/api/subscriptions/update
        """
        params = params or UpdateSubscriptionParams()
        endpoint = resolve_endpoint(SubscriptionOperation.UPDATE, subscription_id)
        data = await self.client.send(
            endpoint.method, endpoint.path, body=encode_update(params)
        )
        return Subscription.model_validate(data)

    async def cancel(
        self,
        subscription_id: str,
        params: Optional[CancelSubscriptionParams] = None,
    ) -> Subscription:
        """Cancel a subscription immediately.

        https://stripe.com/docs/api/subscriptions/cancel
        """
        params = params or CancelSubscriptionParams()
        endpoint = resolve_endpoint(SubscriptionOperation.CANCEL, subscription_id)
        data = await self.client.send(
            endpoint.method, endpoint.path, body=encode_cancel(params)
        )
        return Subscription.model_validate(data)

    async def cancel_at_period_end(
        self, subscription_id: str, at_period_end: bool
    ) -> Subscription:
        """Cancel with the legacy ``at_period_end`` flag.

        .. deprecated::
            Use ``update(subscription_id,
            UpdateSubscriptionParams(cancel_at_period_end=True))`` instead.
        """
        warnings.warn(
            "cancel_at_period_end() is deprecated; use "
            "update(subscription_id, UpdateSubscriptionParams(cancel_at_period_end=...)) instead",
            DeprecationWarning,
            stacklevel=2,
        )
        logger.warning(f"Deprecated legacy cancel used for subscription {subscription_id}")
        params = LegacyCancelSubscriptionParams(at_period_end=at_period_end)
        endpoint = resolve_endpoint(SubscriptionOperation.CANCEL_LEGACY, subscription_id)
        data = await self.client.send(
            endpoint.method, endpoint.path, body=encode_legacy_cancel(params)
        )
        return Subscription.model_validate(data)

    async def list_all(
        self, filters: Optional[Mapping[str, Any]] = None
    ) -> SubscriptionList:
        """List subscriptions. *filters* is flattened into the query string.

        https://stripe.com/docs/api/subscriptions/list
        """
        endpoint = resolve_endpoint(SubscriptionOperation.LIST)
        data = await self.client.send(
            endpoint.method, endpoint.path, query=encode_query(filters)
        )
        return SubscriptionList.model_validate(data)

    async def delete_discount(self, subscription_id: str) -> DeletedObject:
        endpoint = resolve_endpoint(
            SubscriptionOperation.DELETE_DISCOUNT, subscription_id
        )
        data = await self.client.send(endpoint.method, endpoint.path)
        return DeletedObject.model_validate(data)
