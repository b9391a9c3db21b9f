"""
Stripe API client — async httpx transport.

``BaseAPIClient.send`` is the single entry point the route classes use: it
takes an HTTP method, a path relative to the API base, and optional encoded
body/query pairs, attaches credentials, and returns the decoded JSON.
Remote failures are raised as ``APIError``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from stripe_subscriptions.config import DEFAULT_API_BASE, Settings, get_settings
from stripe_subscriptions.services.stripe_api.encoding import EncodedBody
from stripe_subscriptions.services.stripe_api.subscriptions import SubscriptionAPI

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 60.0  # seconds


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class APIError(Exception):
    """Custom exception for API errors."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response: Any = None,
        error_type: Optional[str] = None,
        code: Optional[str] = None,
        param: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response = response
        self.error_type = error_type
        self.code = code
        self.param = param


# ---------------------------------------------------------------------------
# BaseAPIClient — async httpx
# ---------------------------------------------------------------------------

class BaseAPIClient:
    """Base API client with authentication and request handling (async)."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_base: str = DEFAULT_API_BASE,
        api_version: Optional[str] = None,
        stripe_account: Optional[str] = None,
        timeout: float = REQUEST_TIMEOUT,
    ):
        self.api_key = api_key
        self.api_version = api_version
        self.stripe_account = stripe_account
        self.base_url = api_base.rstrip("/") + "/"

        # Shared async client (caller must close via ``aclose()``)
        self._http = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            headers=self._default_headers(),
        )

    # -- helpers --

    def _default_headers(self) -> Dict[str, str]:
        """Non-auth headers only; the key is attached per request."""
        headers = {"Accept": "application/json"}
        if self.api_version:
            headers["Stripe-Version"] = self.api_version
        return headers

    def _prepare_headers(
        self, headers: Optional[Dict[str, str]] = None
    ) -> Dict[str, str]:
        merged: Dict[str, str] = {}
        if headers:
            merged.update(headers)
        if "Authorization" not in merged:
            if not self.api_key:
                raise APIError("Stripe API key is required (set STRIPE_API_KEY).")
            merged["Authorization"] = f"Bearer {self.api_key}"
        if self.stripe_account and "Stripe-Account" not in merged:
            merged["Stripe-Account"] = self.stripe_account
        return merged

    @staticmethod
    def _raise_for_error(resp: httpx.Response) -> None:
        """Raise ``APIError`` for non-2xx responses.

        Stripe reports failures as ``{"error": {"type", "message", "code",
        "param"}}``; anything else falls back to the raw response text.
        """
        if resp.is_success:
            return
        try:
            data = resp.json()
        except ValueError:
            data = None
        error = data.get("error") if isinstance(data, dict) else None
        if isinstance(error, dict):
            raise APIError(
                f"HTTP {resp.status_code}: {error.get('message', 'Unknown')}",
                status_code=resp.status_code,
                response=data,
                error_type=error.get("type"),
                code=error.get("code"),
                param=error.get("param"),
            )
        raise APIError(
            f"HTTP {resp.status_code}: {resp.text[:500]}",
            status_code=resp.status_code,
            response=resp.text,
        )

    # -- core request method --

    async def send(
        self,
        method: str,
        path: str,
        body: Optional[EncodedBody] = None,
        query: Optional[EncodedBody] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        req_headers = self._prepare_headers(headers)
        logger.debug(f"{method} {path}")
        try:
            resp = await self._http.request(
                method,
                path,
                data=dict(body.as_form()) if body else None,
                params=query.as_form() if query else None,
                headers=req_headers,
            )
        except httpx.RequestError as exc:
            logger.warning(f"{method} {path} failed: {exc}")
            raise APIError(f"Request failed: {exc}") from exc
        try:
            self._raise_for_error(resp)
        except APIError as exc:
            logger.warning(f"{method} {path} -> {exc.message}")
            raise
        try:
            return resp.json()
        except ValueError as exc:
            raise APIError(
                f"Invalid JSON in response: {resp.text[:500]}",
                status_code=resp.status_code,
                response=resp.text,
            ) from exc

    async def aclose(self) -> None:
        await self._http.aclose()

    # context-manager support
    async def __aenter__(self) -> "BaseAPIClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()


# ---------------------------------------------------------------------------
# StripeAPIClient — aggregator
# ---------------------------------------------------------------------------

class StripeAPIClient(BaseAPIClient):
    """Main Stripe API client — aggregates the route APIs."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_base: str = DEFAULT_API_BASE,
        api_version: Optional[str] = None,
        stripe_account: Optional[str] = None,
        timeout: float = REQUEST_TIMEOUT,
    ):
        super().__init__(api_key, api_base, api_version, stripe_account, timeout)

        # Sub-clients
        self.subscriptions = SubscriptionAPI(self)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "StripeAPIClient":
        settings = settings or get_settings()
        return cls(
            api_key=settings.stripe_api_key,
            api_base=settings.stripe_api_base,
            api_version=settings.stripe_api_version,
            stripe_account=settings.stripe_account,
            timeout=settings.request_timeout,
        )
