from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from ..filters import validate_new_todo
from ..models import TodoEntity
from ..repositories import Repository, get_repository
from ..schemas import TodoCreate, TodoOut

router = APIRouter(
    prefix="/todos",
    tags=["todos"],
)

_NOT_FOUND = {404: {"description": "Todo not found"}}


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Todo not found")


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=List[TodoOut],
    summary="List Todos",
    description="Return every todo in insertion order.",
)
def list_todos(repo: Repository = Depends(get_repository)) -> List[TodoOut]:
    return [TodoOut(**it) for it in repo.get_all()]


# PUBLIC_INTERFACE
@router.get(
    "/{todo_id}",
    response_model=TodoOut,
    summary="Get Todo",
    description="Get a single Todo item by ID.",
    responses=_NOT_FOUND,
)
def get_todo(todo_id: int, repo: Repository = Depends(get_repository)) -> TodoOut:
    """
    Retrieve a single Todo item by its ID.
    """
    item = repo.get_by_id(todo_id)
    if item is None:
        raise _not_found()
    return TodoOut(**item)


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=TodoOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create Todo",
    description=(
        "Create a new Todo item. The due date must not be in the past and new todos "
        "cannot start out completed."
    ),
    responses={
        201: {"description": "Todo created; Location points at the new resource"},
        400: {"description": "Validation problem keyed by field name"},
    },
)
def create_todo(
    response: Response,
    payload: TodoCreate = Depends(validate_new_todo),
    repo: Repository = Depends(get_repository),
) -> TodoOut:
    """
    Create a new Todo. The id is reserved only after validation has passed.
    """
    entity: TodoEntity = {
        "id": repo.allocate_id(),
        "name": payload.name,
        "due_date": payload.due_date,
        "is_completed": payload.is_completed,
    }
    created = repo.add(entity)
    response.headers["Location"] = f"/todos/{created['id']}"
    return TodoOut(**created)


# PUBLIC_INTERFACE
@router.patch(
    "/{todo_id}",
    response_model=TodoOut,
    summary="Toggle Todo",
    description="Flip the completion flag of a Todo item.",
    responses=_NOT_FOUND,
)
def toggle_todo(todo_id: int, repo: Repository = Depends(get_repository)) -> TodoOut:
    updated = repo.toggle_completed(todo_id)
    if updated is None:
        raise _not_found()
    return TodoOut(**updated)


# PUBLIC_INTERFACE
@router.delete(
    "/{todo_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Todo",
    description="Delete a Todo item by ID. Deleting a missing id still returns 204.",
)
def delete_todo(todo_id: int, repo: Repository = Depends(get_repository)) -> Response:
    repo.delete_by_id(todo_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
