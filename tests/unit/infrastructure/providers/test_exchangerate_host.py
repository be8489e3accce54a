import httpx
import pytest

from helpers import http_status_error, make_client
from domain.exceptions.rates import (
    MalformedResponse,
    MissingCurrencyData,
    ProviderError,
    TransportFailure,
    UnexpectedStatus,
)
from infrastructure.providers.exchangerate_host import ExchangerateHostProvider


@pytest.mark.asyncio
async def test_fetch_success_returns_all_rates(primary_payload):
    client = make_client(primary_payload)
    provider = ExchangerateHostProvider(client=client)

    result = await provider.fetch()

    assert result.provider == 'exchangerate.host'
    assert result.updated_at == '2025-09-27'
    assert result.rates == {'EUR': 0.8513, 'CNY': 7.1345, 'JPY': 149.52, 'GBP': 0.7461, 'AUD': 1.5274}

    client.get.assert_called_once()
    call_args = client.get.call_args
    assert call_args[0][0] == 'https://api.exchangerate.host/latest'
    assert call_args[1]['params'] == {'base': 'USD', 'symbols': 'EUR,CNY,JPY,GBP,AUD'}


@pytest.mark.asyncio
async def test_fetch_uses_configured_url(primary_payload):
    client = make_client(primary_payload)
    provider = ExchangerateHostProvider(url='http://rates.internal/latest', client=client)

    await provider.fetch()

    assert client.get.call_args[0][0] == 'http://rates.internal/latest'


@pytest.mark.asyncio
async def test_fetch_without_date_leaves_updated_at_empty(primary_payload):
    del primary_payload['date']
    provider = ExchangerateHostProvider(client=make_client(primary_payload))

    result = await provider.fetch()

    assert result.updated_at is None


@pytest.mark.asyncio
async def test_fetch_missing_currency_fails(primary_payload):
    del primary_payload['rates']['JPY']
    provider = ExchangerateHostProvider(client=make_client(primary_payload))

    with pytest.raises(MissingCurrencyData) as exc_info:
        await provider.fetch()

    assert 'Missing rate for JPY' in str(exc_info.value)


@pytest.mark.asyncio
@pytest.mark.parametrize('bad_value', [None, 'abc', float('nan'), float('inf'), True, 0, -1.5, 10**400])
async def test_fetch_non_numeric_rate_fails(primary_payload, bad_value):
    primary_payload['rates']['GBP'] = bad_value
    provider = ExchangerateHostProvider(client=make_client(primary_payload))

    with pytest.raises(MissingCurrencyData) as exc_info:
        await provider.fetch()

    assert 'GBP' in str(exc_info.value)


@pytest.mark.asyncio
async def test_fetch_lowercase_codes_are_not_matched(primary_payload):
    primary_payload['rates'] = {k.lower(): v for k, v in primary_payload['rates'].items()}
    provider = ExchangerateHostProvider(client=make_client(primary_payload))

    with pytest.raises(MissingCurrencyData):
        await provider.fetch()


@pytest.mark.asyncio
async def test_fetch_missing_success_marker(primary_payload):
    del primary_payload['success']
    provider = ExchangerateHostProvider(client=make_client(primary_payload))

    with pytest.raises(MalformedResponse) as exc_info:
        await provider.fetch()

    assert 'success marker' in str(exc_info.value)


@pytest.mark.asyncio
async def test_fetch_api_returns_error():
    payload = {'success': False, 'error': {'code': 101, 'info': 'Invalid access key'}}
    provider = ExchangerateHostProvider(client=make_client(payload))

    with pytest.raises(MalformedResponse) as exc_info:
        await provider.fetch()

    assert 'Invalid access key' in str(exc_info.value)


@pytest.mark.asyncio
async def test_fetch_missing_rates_container():
    provider = ExchangerateHostProvider(client=make_client({'success': True, 'date': '2025-09-27'}))

    with pytest.raises(MalformedResponse) as exc_info:
        await provider.fetch()

    assert 'did not contain rate information' in str(exc_info.value)


@pytest.mark.asyncio
async def test_fetch_http_500_error():
    client = make_client(side_effect=http_status_error(500, 'Internal Server Error'))
    provider = ExchangerateHostProvider(client=client)

    with pytest.raises(UnexpectedStatus) as exc_info:
        await provider.fetch()

    assert 'HTTP error 500' in str(exc_info.value)
    assert exc_info.value.status_code == 500


@pytest.mark.asyncio
async def test_fetch_http_429_rate_limit():
    provider = ExchangerateHostProvider(client=make_client(side_effect=http_status_error(429, 'Rate limit exceeded')))

    with pytest.raises(UnexpectedStatus) as exc_info:
        await provider.fetch()

    assert '429' in str(exc_info.value)
    assert 'Rate limit exceeded' in str(exc_info.value)


@pytest.mark.asyncio
async def test_fetch_network_timeout():
    provider = ExchangerateHostProvider(client=make_client(side_effect=httpx.TimeoutException('Request timed out')))

    with pytest.raises(TransportFailure) as exc_info:
        await provider.fetch()

    assert 'request failed' in str(exc_info.value).lower()


@pytest.mark.asyncio
async def test_fetch_connection_error():
    provider = ExchangerateHostProvider(client=make_client(side_effect=httpx.ConnectError('Connection refused')))

    with pytest.raises(TransportFailure) as exc_info:
        await provider.fetch()

    assert 'ConnectError' in str(exc_info.value)


@pytest.mark.asyncio
async def test_fetch_invalid_json_response():
    provider = ExchangerateHostProvider(client=make_client(ValueError('Invalid JSON')))

    with pytest.raises(MalformedResponse) as exc_info:
        await provider.fetch()

    assert 'parsing error' in str(exc_info.value).lower()


@pytest.mark.asyncio
async def test_failures_are_provider_errors():
    provider = ExchangerateHostProvider(client=make_client(side_effect=http_status_error(503)))

    with pytest.raises(ProviderError):
        await provider.fetch()


@pytest.mark.asyncio
async def test_close_closes_client():
    client = make_client({})
    provider = ExchangerateHostProvider(client=client)

    await provider.close()

    client.aclose.assert_awaited_once()


def test_incomplete_subclass_fails_on_instantiation():
    from infrastructure.providers.base import BaseRatesProvider

    class NamelessProvider(BaseRatesProvider):
        def _extract_rates(self, data: dict) -> dict:
            return data

    with pytest.raises(TypeError):
        NamelessProvider(client=make_client({}))
