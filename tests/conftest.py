"""
Shared fixtures for provider, service and API tests.
"""

import pytest

from helpers import PRIMARY_PAYLOAD, SECONDARY_PAYLOAD


@pytest.fixture
def primary_payload():
    return {**PRIMARY_PAYLOAD, 'rates': dict(PRIMARY_PAYLOAD['rates'])}


@pytest.fixture
def secondary_payload():
    return {**SECONDARY_PAYLOAD, 'usd': dict(SECONDARY_PAYLOAD['usd'])}
