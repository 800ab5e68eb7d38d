"""In-memory store used by default and as a test double."""

import uuid

from config import settings
from models.layout import Layout
from models.organization import Organization
from store.base import LayoutNotFoundError


class InMemoryLayouts:
    """Layouts kept in a dict keyed by ID, in insertion order."""

    def __init__(self) -> None:
        self._layouts: dict[str, Layout] = {}

    def add(self, layout: Layout) -> Layout:
        stored = layout.model_copy(update={"id": uuid.uuid4().hex}, deep=True)
        self._layouts[stored.id] = stored
        return stored.model_copy(deep=True)

    def all(self) -> list[Layout]:
        return [layout.model_copy(deep=True) for layout in self._layouts.values()]

    def get(self, layout_id: str) -> Layout:
        layout = self._layouts.get(layout_id)
        if layout is None:
            raise LayoutNotFoundError(layout_id)
        return layout.model_copy(deep=True)

    def update(self, layout: Layout) -> None:
        if layout.id not in self._layouts:
            raise LayoutNotFoundError(layout.id)
        self._layouts[layout.id] = layout.model_copy(deep=True)

    def delete(self, layout: Layout) -> None:
        if self._layouts.pop(layout.id, None) is None:
            raise LayoutNotFoundError(layout.id)


class InMemoryOrganizations:
    """Holds the single default organization."""

    def __init__(self, default: Organization) -> None:
        self._default = default

    def default_organization(self) -> Organization:
        return self._default


class InMemoryStore:
    """Process-local store; contents are lost on restart."""

    def __init__(self, default_organization: Organization | None = None) -> None:
        if default_organization is None:
            default_organization = Organization(
                id=settings.default_organization_id,
                name=settings.default_organization_name,
            )
        self._layouts = InMemoryLayouts()
        self._organizations = InMemoryOrganizations(default_organization)

    def layouts(self) -> InMemoryLayouts:
        return self._layouts

    def organizations(self) -> InMemoryOrganizations:
        return self._organizations
