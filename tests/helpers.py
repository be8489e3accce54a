"""
Canned provider payloads and httpx client stand-ins shared by the tests.
"""

from unittest.mock import AsyncMock, Mock

import httpx


PRIMARY_PAYLOAD = {
    'success': True,
    'base': 'USD',
    'date': '2025-09-27',
    'rates': {'EUR': 0.8513, 'CNY': 7.1345, 'JPY': 149.52, 'GBP': 0.7461, 'AUD': 1.5274},
}

SECONDARY_PAYLOAD = {
    'date': '2025-09-28',
    'usd': {
        'eur': 0.8521,
        'cny': 7.1301,
        'jpy': 149.87,
        'gbp': 0.7455,
        'aud': 1.5302,
        'btc': 0.0000091,
    },
}


def make_response(json_data):
    response = Mock()
    response.raise_for_status = Mock()
    if isinstance(json_data, Exception):
        response.json.side_effect = json_data
    else:
        response.json.return_value = json_data
    return response


def make_client(json_data=None, side_effect=None):
    client = AsyncMock(spec=httpx.AsyncClient)
    if side_effect is not None:
        client.get.side_effect = side_effect
    else:
        client.get.return_value = make_response(json_data)
    return client


def http_status_error(status_code: int, text: str = 'error') -> httpx.HTTPStatusError:
    error_response = Mock()
    error_response.status_code = status_code
    error_response.text = text
    return httpx.HTTPStatusError('HTTP error', request=Mock(), response=error_response)


