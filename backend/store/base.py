"""Capabilities the layout service needs from a backing store."""

from typing import Protocol

from models.layout import Layout
from models.organization import Organization


class StoreError(Exception):
    """Error raised by a store operation."""


class LayoutNotFoundError(StoreError):
    """Raised when no layout exists for an ID."""

    def __init__(self, layout_id: str) -> None:
        self.layout_id = layout_id
        super().__init__(f"layout {layout_id} not found")


class LayoutsStore(Protocol):
    """CRUD over stored layouts."""

    def add(self, layout: Layout) -> Layout:
        """Store a new layout and return it with its assigned ID."""
        ...

    def all(self) -> list[Layout]:
        ...

    def get(self, layout_id: str) -> Layout:
        ...

    def update(self, layout: Layout) -> None:
        """Replace the stored layout with the same ID."""
        ...

    def delete(self, layout: Layout) -> None:
        ...


class OrganizationsStore(Protocol):
    """Lookup of the organization used when a layout names none."""

    def default_organization(self) -> Organization:
        ...


class Store(Protocol):
    """Entry point to every store the service uses."""

    def layouts(self) -> LayoutsStore:
        ...

    def organizations(self) -> OrganizationsStore:
        ...
