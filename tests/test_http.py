import pytest
from aiohttp import ClientSession, web
from aiohttp import test_utils
from arnie_quotes import Client, Response, get_arnie_quotes


async def handle_quote(request: web.Request) -> web.Response:
    return web.json_response({'message': "I'll be back"})


async def handle_down(request: web.Request) -> web.Response:
    return web.json_response({'message': 'down'}, status=500)


async def handle_garbage(request: web.Request) -> web.Response:
    return web.Response(text='definitely not json')


def make_app() -> web.Application:
    app = web.Application()
    app.router.add_get('/quote', handle_quote)
    app.router.add_get('/down', handle_down)
    app.router.add_get('/garbage', handle_garbage)
    return app


@pytest.mark.asyncio
async def test_client_get() -> None:
    async with test_utils.TestServer(make_app()) as server:
        async with ClientSession() as session:
            client = Client(session)
            resp = await client.get(str(server.make_url('/quote')))
            assert resp == Response(status=200, body='{"message": "I\'ll be back"}')
            resp = await client(str(server.make_url('/down')))
            assert resp.status == 500
            resp = await client(str(server.make_url('/missing')))
            assert resp.status == 404


@pytest.mark.asyncio
async def test_get_arnie_quotes_with_client() -> None:
    async with test_utils.TestServer(make_app()) as server:
        urls = [str(server.make_url(path)) for path in ('/down', '/quote', '/garbage')]
        async with ClientSession() as session:
            results = await get_arnie_quotes(urls, Client(session))
    assert results == [
        {'FAILURE': 'down'},
        {'Arnie Quote': "I'll be back"},
        {'Arnie Quote': 'Invalid response format'},
    ]


@pytest.mark.asyncio
async def test_get_arnie_quotes_default_session() -> None:
    async with test_utils.TestServer(make_app()) as server:
        urls = [str(server.make_url('/quote'))] * 3
        results = await get_arnie_quotes(urls, limit=2)
    assert results == [{'Arnie Quote': "I'll be back"}] * 3


@pytest.mark.asyncio
async def test_connection_error() -> None:
    async with test_utils.TestServer(make_app()) as server:
        ok_url = str(server.make_url('/quote'))
        results = await get_arnie_quotes([ok_url, 'http://127.0.0.1:1/quote'])
    assert results[0] == {'Arnie Quote': "I'll be back"}
    assert list(results[1]) == ['FAILURE']
    assert results[1]['FAILURE']
