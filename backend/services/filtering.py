"""Query-time filtering and de-duplication of layout collections."""

from collections.abc import Iterable

from models.layout import Layout


def filter_terms(
    apps: Iterable[str] | None = None, measurements: Iterable[str] | None = None
) -> set[str]:
    """Merge application and measurement names into one sieve."""
    return set(apps or ()) | set(measurements or ())


def _matches(layout: Layout, terms: set[str]) -> bool:
    # An empty sieve accepts everything
    if not terms:
        return True
    return layout.application in terms or layout.measurement in terms


def select_layouts(layouts: Iterable[Layout], terms: set[str]) -> list[Layout]:
    """Return the layouts matching ``terms`` in input order, without duplicates.

    A layout matches when the terms are empty or contain its application or
    measurement. Layouts repeating a measurement and ID already emitted are
    skipped.
    """
    selected: list[Layout] = []
    seen: set[tuple[str, str]] = set()

    for layout in layouts:
        key = (layout.measurement, layout.id)
        if key in seen:
            continue
        if _matches(layout, terms):
            seen.add(key)
            selected.append(layout)

    return selected
