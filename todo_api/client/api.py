"""HTTP clients used by the client view.

`TodoClient` talks to the Todo API, `QuoteClient` to the third-party quote
service. Both return decoded JSON and leave status handling to the caller;
transport and decoding errors propagate.
"""

import logging
from typing import Any

import httpx

logger = logging.getLogger('todo_api.client.api')


class TodoClient:
    def __init__(self, http: httpx.AsyncClient, base_url: str = '') -> None:
        self.http = http
        self.base_url = base_url.rstrip('/')

    async def list_todos(self) -> Any:
        response = await self.http.get(f'{self.base_url}/api/todos')
        return response.json()  # {"todos": [...]}

    async def create_todo(self, text: str) -> Any:
        response = await self.http.post(f'{self.base_url}/api/todo', json={'todo': text})
        return response.json()

    async def delete_todo(self, todo_id: str) -> Any:
        response = await self.http.delete(f'{self.base_url}/api/todo/{todo_id}')
        return response.json()


class QuoteClient:
    def __init__(self, http: httpx.AsyncClient, url: str) -> None:
        self.http = http
        self.url = url

    async def random_quote(self) -> str:
        response = await self.http.get(self.url)
        response.raise_for_status()
        return response.json()['quote']
