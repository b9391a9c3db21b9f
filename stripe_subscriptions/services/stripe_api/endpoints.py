"""
Endpoint resolution for the subscription routes.

Maps a logical operation (and, for item-level operations, a subscription
id) to the HTTP method and path relative to the API base URL.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Literal, Optional
from urllib.parse import quote

HTTPMethod = Literal["GET", "POST", "DELETE"]

SUBSCRIPTIONS_PATH = "subscriptions"


class SubscriptionOperation(str, Enum):
    CREATE = "create"
    RETRIEVE = "retrieve"
    UPDATE = "update"
    CANCEL = "cancel"
    CANCEL_LEGACY = "cancel_legacy"
    LIST = "list"
    DELETE_DISCOUNT = "delete_discount"


@dataclass(frozen=True)
class ResolvedEndpoint:
    method: HTTPMethod
    path: str


# (method, path template); "{id}" marks the item-level operations
_ROUTES: Dict[SubscriptionOperation, tuple[HTTPMethod, str]] = {
    SubscriptionOperation.CREATE: ("POST", SUBSCRIPTIONS_PATH),
    SubscriptionOperation.RETRIEVE: ("GET", f"{SUBSCRIPTIONS_PATH}/{{id}}"),
    SubscriptionOperation.UPDATE: ("POST", f"{SUBSCRIPTIONS_PATH}/{{id}}"),
    SubscriptionOperation.CANCEL: ("DELETE", f"{SUBSCRIPTIONS_PATH}/{{id}}"),
    SubscriptionOperation.CANCEL_LEGACY: ("DELETE", f"{SUBSCRIPTIONS_PATH}/{{id}}"),
    SubscriptionOperation.LIST: ("GET", SUBSCRIPTIONS_PATH),
    SubscriptionOperation.DELETE_DISCOUNT: (
        "DELETE",
        f"{SUBSCRIPTIONS_PATH}/{{id}}/discount",
    ),
}


def resolve_endpoint(
    operation: SubscriptionOperation,
    resource_id: Optional[str] = None,
) -> ResolvedEndpoint:
    """Return the method and path for *operation*.

    The id is escaped as a single path segment, so ``/`` or ``?`` inside it
    cannot change the URL structure.

    Raises:
        ValueError: item-level operation without an id, or a collection
            operation given one.
    """
    method, template = _ROUTES[operation]
    if "{id}" in template:
        if not resource_id:
            raise ValueError(f"{operation.value} requires a subscription id")
        return ResolvedEndpoint(method, template.format(id=quote(resource_id, safe="")))
    if resource_id is not None:
        raise ValueError(f"{operation.value} does not take a subscription id")
    return ResolvedEndpoint(method, template)
