"""Test configuration and fixtures."""
import pytest

from stripe_subscriptions.services.stripe_api.client import StripeAPIClient

# ---------------------------------------------------------------------------
# Constants (shared with tests)
# ---------------------------------------------------------------------------
TEST_API_KEY = "sk_test_abc123"
BASE_URL = "https://api.stripe.com/v1"


# ---------------------------------------------------------------------------
# StripeAPIClient fixture
# ---------------------------------------------------------------------------


@pytest.fixture
async def api_client():
    """Async StripeAPIClient wired with a test key."""
    async with StripeAPIClient(api_key=TEST_API_KEY) as client:
        yield client
