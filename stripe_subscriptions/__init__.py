"""Async client for the Stripe subscription routes."""

from stripe_subscriptions.services.stripe_api.client import APIError, StripeAPIClient

__all__ = ["APIError", "StripeAPIClient"]
