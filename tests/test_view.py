import asyncio

import httpx
import pytest

from todo_api.client.api import QuoteClient, TodoClient
from todo_api.client.poller import Poller
from todo_api.client.view import EMPTY_INPUT_ERROR, TodoView
from todo_api.core.config import DEFAULT_QUOTE

API_URL = 'http://todo.test'
QUOTE_URL = 'http://quotes.test/quotes/random'


def quote_transport(quotes):
    """Serve the given quotes in order; exceptions in the list are raised."""
    remaining = list(quotes)

    def handler(request: httpx.Request) -> httpx.Response:
        item = remaining.pop(0) if remaining else 'last quote'
        if isinstance(item, Exception):
            raise item
        return httpx.Response(200, json={'id': 1, 'quote': item, 'author': 'someone'})

    return httpx.MockTransport(handler)


def make_view(app, quotes=(), interval=60.0):
    api_http = httpx.AsyncClient(transport=httpx.ASGITransport(app=app))
    quote_http = httpx.AsyncClient(transport=quote_transport(quotes))
    return TodoView(TodoClient(api_http, API_URL), QuoteClient(quote_http, QUOTE_URL), quote_interval=interval)


def test_initial_state(app):
    view = make_view(app)
    assert view.todos == []
    assert view.is_loading
    assert view.quote == DEFAULT_QUOTE
    assert 'Fetching todos....' in view.render()


def test_mount_loads_existing_todos(app, store):
    store.create_todo('Buy milk')

    async def run():
        view = make_view(app)
        await view.mount()
        view.unmount()
        return view

    view = asyncio.run(run())
    assert [todo['text'] for todo in view.todos] == ['Buy milk']
    assert not view.is_loading
    assert view.error is None
    assert '- Buy milk' in view.render()


def test_mount_records_list_failure():
    def handler(request):
        raise httpx.ConnectError('connection refused')

    async def run():
        view = TodoView(TodoClient(httpx.AsyncClient(transport=httpx.MockTransport(handler)), API_URL),
                        QuoteClient(httpx.AsyncClient(transport=quote_transport([])), QUOTE_URL),
                        quote_interval=60.0)
        await view.mount()
        view.unmount()
        return view

    view = asyncio.run(run())
    assert view.todos == []
    assert view.error == 'connection refused'
    assert not view.is_loading


def test_add_appends_response_record(app, store):
    async def run():
        view = make_view(app)
        await view.mount()
        view.input = 'Buy milk'
        await view.add_todo()
        view.unmount()
        return view

    view = asyncio.run(run())
    assert [todo['text'] for todo in view.todos] == ['Buy milk']
    assert view.todos[0]['id'] == str(store.list_todos()[0]['_id'])
    assert view.input == ''
    assert not view.is_adding


@pytest.mark.parametrize('text', ['', '   '])
def test_add_rejects_blank_input(app, store, text):
    async def run():
        view = make_view(app)
        view.input = text
        await view.add_todo()
        return view

    view = asyncio.run(run())
    assert view.error == EMPTY_INPUT_ERROR
    assert view.todos == []
    assert store.list_todos() == []


def test_failed_add_still_clears_input():
    def handler(request):
        raise httpx.ConnectError('offline')

    async def run():
        view = TodoView(TodoClient(httpx.AsyncClient(transport=httpx.MockTransport(handler)), API_URL),
                        QuoteClient(httpx.AsyncClient(transport=quote_transport([])), QUOTE_URL))
        view.input = 'Buy milk'
        await view.add_todo()
        return view

    view = asyncio.run(run())
    assert view.error == 'offline'
    assert view.input == ''
    assert view.todos == []
    assert not view.is_adding


def test_remove_filters_local_list(app, store):
    store.create_todo('a')
    store.create_todo('b')

    async def run():
        view = make_view(app)
        await view.mount()
        await view.remove_todo(view.todos[0]['id'])
        view.unmount()
        return view

    view = asyncio.run(run())
    assert [todo['text'] for todo in view.todos] == ['b']
    assert [doc['text'] for doc in store.list_todos()] == ['b']
    assert not view.is_deleting


def test_failed_delete_still_removes_locally(app):
    async def run():
        view = make_view(app)
        view.todos = [{'id': 'bogus', 'text': 'ghost'}, {'id': 'other', 'text': 'kept'}]
        await view.remove_todo('bogus')
        return view

    view = asyncio.run(run())
    assert view.todos == [{'id': 'other', 'text': 'kept'}]


def test_toggle_dark_mode(app):
    view = make_view(app)
    view.toggle_dark_mode()
    assert view.dark_mode
    view.toggle_dark_mode()
    assert not view.dark_mode


def test_quotes_replace_text_until_unmount(app):
    async def run():
        view = make_view(app, quotes=['first', httpx.ConnectError('down'), 'third'], interval=0.01)
        delivered = []

        def record(quote):
            delivered.append(quote)
            view.quote = quote

        view.quote_poller.on_result = record
        await view.mount()
        for _ in range(200):
            if 'third' in delivered:
                break
            await asyncio.sleep(0.01)
        view.unmount()
        count = len(delivered)
        await asyncio.sleep(0.05)
        return view, delivered, count

    view, delivered, count = asyncio.run(run())
    assert delivered[:2] == ['first', 'third']
    assert len(delivered) == count
    assert view.quote == delivered[-1]


def test_poller_cancels_once():
    results = []

    async def fetch():
        return len(results)

    async def run():
        poller = Poller(fetch, results.append, interval=0.01)
        poller.start()
        await asyncio.sleep(0.05)
        assert poller.cancel() is True
        assert poller.cancel() is False
        count = len(results)
        await asyncio.sleep(0.05)
        return count, poller.running

    count, running = asyncio.run(run())
    assert count > 0
    assert len(results) == count
    assert not running


def test_poller_cannot_start_twice():
    async def fetch():
        return None

    async def run():
        poller = Poller(fetch, lambda _: None, interval=1.0)
        poller.start()
        with pytest.raises(RuntimeError):
            poller.start()
        poller.cancel()

    asyncio.run(run())


def api_transport(handler):
    return TodoClient(httpx.AsyncClient(transport=httpx.MockTransport(handler)), API_URL)


def test_add_records_store_error_without_appending():
    def handler(request):
        return httpx.Response(400, json={'message': 'connection lost'})

    async def run():
        view = TodoView(api_transport(handler), QuoteClient(httpx.AsyncClient(transport=quote_transport([])), QUOTE_URL))
        view.todos = [{'id': 'a', 'text': 'kept'}]
        view.input = 'Buy milk'
        await view.add_todo()
        return view

    view = asyncio.run(run())
    assert view.error == 'connection lost'
    assert view.todos == [{'id': 'a', 'text': 'kept'}]
    assert view.input == ''
    assert not view.is_adding


def test_remove_transport_failure_keeps_list():
    def handler(request):
        raise httpx.ConnectError('offline')

    async def run():
        view = TodoView(api_transport(handler), QuoteClient(httpx.AsyncClient(transport=quote_transport([])), QUOTE_URL))
        view.todos = [{'id': 'a', 'text': 'kept'}, {'id': 'b', 'text': 'also kept'}]
        await view.remove_todo('a')
        return view

    view = asyncio.run(run())
    assert view.error == 'offline'
    assert view.todos == [{'id': 'a', 'text': 'kept'}, {'id': 'b', 'text': 'also kept'}]
    assert not view.is_deleting
