from __future__ import annotations

from abc import ABC, abstractmethod
from functools import lru_cache
from threading import RLock
from typing import List, Optional

from .models import TodoEntity


# PUBLIC_INTERFACE
class Repository(ABC):
    """Abstract repository contract for todo storage backends."""

    @abstractmethod
    def get_all(self) -> List[TodoEntity]:
        """Return every stored TodoEntity in insertion order."""

    @abstractmethod
    def get_by_id(self, todo_id: int) -> Optional[TodoEntity]:
        """Return a TodoEntity by id, or None if not found."""

    @abstractmethod
    def allocate_id(self) -> int:
        """Reserve and return the next id. Ids are never handed out twice."""

    @abstractmethod
    def add(self, todo: TodoEntity) -> TodoEntity:
        """Append a TodoEntity whose id has already been assigned and return it."""

    @abstractmethod
    def toggle_completed(self, todo_id: int) -> Optional[TodoEntity]:
        """Flip the completion flag. Return the updated entity or None if not found."""

    @abstractmethod
    def delete_by_id(self, todo_id: int) -> None:
        """Remove every TodoEntity with the given id. Missing ids are a no-op."""


class InMemoryRepository(Repository):
    """
    Thread-safe list-backed repository. State lives for the process lifetime only.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._items: List[TodoEntity] = []
        self._next_id = 1

    def _find(self, todo_id: int) -> Optional[TodoEntity]:
        for item in self._items:
            if item["id"] == todo_id:
                return item
        return None

    def get_all(self) -> List[TodoEntity]:
        with self._lock:
            # Return copies to avoid external mutation
            return [t.copy() for t in self._items]

    def get_by_id(self, todo_id: int) -> Optional[TodoEntity]:
        with self._lock:
            item = self._find(todo_id)
            return None if item is None else item.copy()

    def allocate_id(self) -> int:
        with self._lock:
            i = self._next_id
            self._next_id += 1
            return i

    def add(self, todo: TodoEntity) -> TodoEntity:
        stored = todo.copy()
        with self._lock:
            self._items.append(stored)
            # Keep the counter ahead of ids assigned outside allocate_id().
            self._next_id = max(self._next_id, stored["id"] + 1)
            return stored.copy()

    def toggle_completed(self, todo_id: int) -> Optional[TodoEntity]:
        with self._lock:
            item = self._find(todo_id)
            if item is None:
                return None
            item["is_completed"] = not item["is_completed"]
            return item.copy()

    def delete_by_id(self, todo_id: int) -> None:
        with self._lock:
            self._items[:] = [t for t in self._items if t["id"] != todo_id]


# PUBLIC_INTERFACE
@lru_cache(maxsize=1)
def get_repository() -> Repository:
    """
    Return the process-wide repository. Routes depend on this function, so tests
    can swap the store via `app.dependency_overrides[get_repository]`.
    """
    return InMemoryRepository()
