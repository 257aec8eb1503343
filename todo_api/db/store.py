"""Todo store: a thin handle over the MongoDB collection.

Every operation is a single driver call. Driver errors (including
`bson.errors.InvalidId` for malformed identifiers) propagate to the caller,
which decides how to report them.
"""

import logging
from typing import Any, Dict, List, Optional

from bson import ObjectId
from pymongo import MongoClient
from pymongo.collection import Collection

from ..core.config import Settings

logger = logging.getLogger('todo_api.db')


class TodoStore:
    def __init__(self, collection: Collection) -> None:
        self.collection = collection

    def list_todos(self) -> List[Dict[str, Any]]:
        """All documents in the collection's natural order."""
        return list(self.collection.find())

    def create_todo(self, text: str) -> Dict[str, Any]:
        """Insert a new document and return it including the assigned `_id`."""
        doc: Dict[str, Any] = {"text": text}
        result = self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return doc

    def delete_todo(self, todo_id: str) -> Optional[Dict[str, Any]]:
        """
        Remove the document with the given id.

        Returns:
            The removed document, or None if nothing matched
        """
        return self.collection.find_one_and_delete({"_id": ObjectId(todo_id)})


def connect(settings: Settings) -> tuple[MongoClient, TodoStore]:
    """
    Open a client, verify the server answers and wrap the todo collection.

    Raises whatever the driver raises when the server is unreachable.
    """
    client: MongoClient = MongoClient(settings.MONGO_URL, serverSelectionTimeoutMS=5000)
    try:
        client.admin.command('ping')
    except Exception:
        client.close()
        raise
    logger.info(f'Database connected ({settings.DB_NAME}.{settings.COLLECTION})')
    return client, TodoStore(client[settings.DB_NAME][settings.COLLECTION])
