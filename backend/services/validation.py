"""Rules a layout must satisfy before it is stored."""

from models.layout import Layout


class LayoutValidationError(ValueError):
    """Raised when a layout request fails validation."""


def effective_organization(layout: Layout, default_organization_id: str) -> str:
    """Return the organization a layout belongs to, falling back to the default.

    The layout itself is never modified.
    """
    return layout.organization or default_organization_id


def validate_layout(layout: Layout, default_organization_id: str) -> None:
    """Check that a layout has an app, a measurement and well-formed cells.

    The first violation aborts validation. No rule depends on the organization,
    so ``default_organization_id`` is not consulted yet.

    Raises:
        LayoutValidationError: If any rule is violated.
    """
    if not layout.application or not layout.measurement or not layout.cells:
        raise LayoutValidationError("app, measurement, and cells required")

    for cell in layout.cells:
        if cell.w == 0 or cell.h == 0:
            raise LayoutValidationError("w, and h required")
        for query in cell.queries:
            if not query.command:
                raise LayoutValidationError("query required")
