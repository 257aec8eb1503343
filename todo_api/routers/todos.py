"""Todo CRUD endpoints.

Exposes:
- GET    /api/todos     : every todo in store order
- POST   /api/todo      : create a todo from `{"todo": "..."}`
- DELETE /api/todo/{id} : remove a todo, `{"todo": null}` if it did not exist

Store failures of any kind are answered with 400 and the driver's message.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse

from ..core.models_io import (
    Todo,
    TodoCreateRequest,
    TodoCreateResponse,
    TodoDeleteResponse,
    TodoListResponse,
)
from ..db.store import TodoStore

logger = logging.getLogger('todo_api.routers.todos')

router = APIRouter(prefix="/api")


def get_store(request: Request) -> TodoStore:
    """The store handle injected into the app at construction or startup."""
    return request.app.state.store


@router.get("/todos", response_model=TodoListResponse)
def list_todos(store: TodoStore = Depends(get_store)):
    # Documents without the expected fields count as store failures too
    try:
        todos = [Todo.from_document(doc) for doc in store.list_todos()]
    except Exception as e:
        logger.warning(f'Listing todos failed: {e!r}')
        raise HTTPException(status_code=400, detail=str(e))
    return TodoListResponse(todos=todos)


@router.post("/todo", response_model=TodoCreateResponse)
def create_todo(req: Optional[TodoCreateRequest] = None, store: TodoStore = Depends(get_store)):
    text = req.todo if req is not None else None
    if not isinstance(text, str) or not text.strip():
        return JSONResponse(status_code=400, content="Todo is required.")

    try:
        new_todo = Todo.from_document(store.create_todo(text))
    except Exception as e:
        logger.warning(f'Creating todo failed: {e}')
        raise HTTPException(status_code=400, detail=str(e))
    return TodoCreateResponse(newTodo=new_todo)


# Without an id the path does not reach the route below
@router.delete("/todo", include_in_schema=False)
@router.delete("/todo/", include_in_schema=False)
def delete_todo_without_id():
    return JSONResponse(status_code=400, content="Id is required.")


@router.delete("/todo/{todo_id}", response_model=TodoDeleteResponse)
def delete_todo(todo_id: str, store: TodoStore = Depends(get_store)):
    if not todo_id:
        return JSONResponse(status_code=400, content="Id is required.")

    try:
        doc = store.delete_todo(todo_id)
        removed = Todo.from_document(doc) if doc is not None else None
    except Exception as e:
        logger.warning(f'Deleting todo {todo_id} failed: {e}')
        raise HTTPException(status_code=400, detail=str(e))
    return TodoDeleteResponse(todo=removed)
