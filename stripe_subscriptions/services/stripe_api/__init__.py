"""Stripe API module — subscription routes over an async httpx transport.

Key entry points:
  - client.StripeAPIClient           — transport + aggregated route APIs
  - subscriptions.SubscriptionAPI    — create/retrieve/update/cancel/list/delete_discount
  - encoding.encode_*                — per-operation form/query encoders
  - endpoints.resolve_endpoint()     — operation -> (method, path)
"""
