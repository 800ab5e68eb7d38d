"""FastAPI dependencies."""

from store.base import Store
from store.memory import InMemoryStore

_store = InMemoryStore()


def get_store() -> Store:
    """Return the store backing the layout endpoints.

    Tests replace it through ``app.dependency_overrides``.
    """
    return _store
