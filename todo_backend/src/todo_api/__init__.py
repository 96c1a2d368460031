"""
In-memory Todo API package.

The FastAPI application lives in `todo_api.main` (`app`, `create_app`, `run`).
"""
