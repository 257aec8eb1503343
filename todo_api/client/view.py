"""Client view: local state of the to-do page and the actions that change it.

The view keeps its own copy of the list. Creates append the record from the
response and deletes filter the local list as soon as a response arrives,
whatever its status; the list is only fetched in full on mount.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from ..core.config import DEFAULT_QUOTE, Settings
from .api import QuoteClient, TodoClient
from .poller import Poller

logger = logging.getLogger('todo_api.client.view')

EMPTY_INPUT_ERROR = "Input field cannot be empty."


def _error_message(data: Any) -> str:
    if isinstance(data, dict):
        return str(data.get('message', data))
    return str(data)


class TodoView:
    def __init__(self, api: TodoClient, quotes: QuoteClient, quote_interval: float = 5.0) -> None:
        self.api = api

        self.todos: List[Dict[str, Any]] = []
        self.input = ''
        self.dark_mode = False
        self.error: Optional[str] = None
        self.quote = DEFAULT_QUOTE

        self.is_adding = False
        self.is_loading = True
        self.is_deleting = False

        self.quote_poller: Poller[str] = Poller(quotes.random_quote, self._set_quote, quote_interval)

    @classmethod
    def from_settings(cls, settings: Settings, http: httpx.AsyncClient) -> 'TodoView':
        return cls(api=TodoClient(http, settings.API_URL),
                   quotes=QuoteClient(http, settings.QUOTE_URL),
                   quote_interval=settings.QUOTE_INTERVAL)

    def _set_quote(self, quote: str) -> None:
        self.quote = quote

    async def mount(self) -> None:
        """Start the quote poller and load the list once."""
        self.quote_poller.start()
        try:
            data = await self.api.list_todos()
            if isinstance(data, dict) and isinstance(data.get('todos'), list):
                self.todos = data['todos']
            else:
                self.error = _error_message(data)
        except Exception as e:
            logger.debug(f'Fetching todos failed: {e}')
            self.error = str(e)
        finally:
            self.is_loading = False

    def unmount(self) -> None:
        self.quote_poller.cancel()

    async def add_todo(self) -> None:
        if self.input.strip() == '':
            self.error = EMPTY_INPUT_ERROR
            return

        try:
            self.is_adding = True
            data = await self.api.create_todo(self.input)
            new_todo = data.get('newTodo') if isinstance(data, dict) else None
            if new_todo is not None:
                self.todos = [*self.todos, new_todo]
            else:
                self.error = _error_message(data)
        except Exception as e:
            self.error = str(e)
        finally:
            # a failed create clears the input as well
            self.is_adding = False
            self.input = ''

    async def remove_todo(self, todo_id: str) -> None:
        try:
            self.is_deleting = True
            await self.api.delete_todo(todo_id)
            self.todos = [todo for todo in self.todos if todo.get('id') != todo_id]
        except Exception as e:
            self.error = str(e)
        finally:
            self.is_deleting = False

    def toggle_dark_mode(self) -> None:
        self.dark_mode = not self.dark_mode

    def render(self) -> str:
        """Plain-text rendering of the page, top to bottom."""
        lines = [f"My ToDo App {'🌙' if self.dark_mode else '☀️'}",
                 'Stay Organized',
                 self.quote,
                 '']
        if self.error:
            lines.append(self.error)
        if self.is_loading:
            lines.append('Fetching todos....')
        elif not self.todos:
            lines.append('No todos found.')
        else:
            lines.extend(f"- {todo.get('text', '')}" for todo in self.todos)
        return '\n'.join(lines)
