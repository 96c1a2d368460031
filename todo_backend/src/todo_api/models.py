from __future__ import annotations

from datetime import datetime
from typing import TypedDict


# PUBLIC_INTERFACE
class TodoEntity(TypedDict):
    """
    A lightweight domain record representing a Todo item held by the store.

    Fields:
    - id: Unique integer identifier, assigned by the store
    - name: Free-form label
    - due_date: Timezone-aware (UTC) due datetime
    - is_completed: Completion flag, flipped by the toggle endpoint
    """

    id: int
    name: str
    due_date: datetime
    is_completed: bool
