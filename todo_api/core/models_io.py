"""Pydantic request/response schemas used by the API.

These mirror the JSON bodies exchanged with the frontend so payloads stay
compatible across direct API calls and the web client.
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field


class Todo(BaseModel):
    """A single to-do item as sent over the wire."""
    id: str = Field(..., description="Store-assigned identifier")
    text: str = Field(..., description="Task text")

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "Todo":
        """Build from a raw store document (`_id` is the driver's ObjectId)."""
        if "text" not in doc:
            raise ValueError(f"Document {doc.get('_id')} has no text field")
        return cls(id=str(doc["_id"]), text=doc["text"])


class TodoCreateRequest(BaseModel):
    """
    Body of `POST /api/todo`.

    The field is optional here so that a missing value can be answered with
    the plain "Todo is required." message instead of a schema error.
    """
    todo: Optional[Any] = None


class TodoListResponse(BaseModel):
    todos: List[Todo]


class TodoCreateResponse(BaseModel):
    newTodo: Todo


class TodoDeleteResponse(BaseModel):
    todo: Optional[Todo] = None  # None when no record matched the id


class ErrorResponse(BaseModel):
    message: str
