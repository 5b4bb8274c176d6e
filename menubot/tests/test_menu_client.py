import httpx
import pytest
from menubot.domain.errors import DecodeError, NetworkError
from menubot.infra.Menu_Client import MenuClient

API_URL = "http://menu.test/api"
PAYLOAD = [{"month": 6, "days": [10, "x", 11], "higawari": ["Curry", "Ramen", "Udon"]}]


def _client(handler, retries=1):
    return MenuClient(API_URL, timeout=1.0, retries=retries, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_fetch_menus_decodes_payload():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json=PAYLOAD)

    menus = await _client(handler).fetch_menus()
    assert len(seen) == 1
    assert seen[0].method == "GET"
    assert str(seen[0].url) == API_URL
    assert menus[0].days == (10, 11)


@pytest.mark.asyncio
async def test_single_retry_after_transport_error():
    calls = {"n": 0}

    def handler(request):
        calls["n"] += 1
        if calls["n"] == 1:
            raise httpx.ConnectError("connection refused", request=request)
        return httpx.Response(200, json=PAYLOAD)

    menus = await _client(handler).fetch_menus()
    assert calls["n"] == 2
    assert len(menus) == 1


@pytest.mark.asyncio
async def test_gives_up_after_one_retry():
    calls = {"n": 0}

    def handler(request):
        calls["n"] += 1
        return httpx.Response(503)

    with pytest.raises(NetworkError) as exc:
        await _client(handler).fetch_menus()
    assert calls["n"] == 2
    assert exc.value.status_code == 503


@pytest.mark.asyncio
async def test_client_error_not_retried():
    calls = {"n": 0}

    def handler(request):
        calls["n"] += 1
        return httpx.Response(404)

    with pytest.raises(NetworkError):
        await _client(handler).fetch_menus()
    assert calls["n"] == 1


@pytest.mark.asyncio
async def test_empty_body_is_network_error():
    with pytest.raises(NetworkError):
        await _client(lambda request: httpx.Response(200, content=b"")).fetch_menus()


@pytest.mark.asyncio
async def test_bad_json_is_decode_error():
    with pytest.raises(DecodeError):
        await _client(lambda request: httpx.Response(200, content=b"not json")).fetch_menus()


@pytest.mark.asyncio
async def test_no_retry_when_disabled():
    calls = {"n": 0}

    def handler(request):
        calls["n"] += 1
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(NetworkError):
        await _client(handler, retries=0).fetch_menus()
    assert calls["n"] == 1
