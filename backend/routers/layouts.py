"""Layout router: create, list, fetch, replace and delete dashboard layouts."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status

from dependencies import get_store
from models.layout import Layout
from services.filtering import filter_terms, select_layouts
from services.response import (
    LayoutResponse,
    LayoutsResponse,
    build_layout_response,
    build_layouts_response,
)
from services.validation import (
    LayoutValidationError,
    effective_organization,
    validate_layout,
)
from store.base import Store, StoreError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/layouts", tags=["layouts"])


async def _decode_layout(request: Request) -> Layout:
    """Parse the request body as a layout.

    Raises:
        HTTPException: 400 if the body is not a well-formed layout document.
    """
    try:
        return Layout.model_validate(await request.json())
    except ValueError as exc:
        logger.warning("Unparsable layout body: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Unparsable JSON"
        ) from exc


def _unknown_error(message: str) -> HTTPException:
    logger.error(message)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Unknown error: {message}",
    )


def _not_found(layout_id: str) -> HTTPException:
    message = f"ID {layout_id} not found"
    logger.warning(message)
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=message)


def _validate(store: Store, layout: Layout) -> str:
    """Validate a layout against the store's default organization.

    Returns the organization the layout belongs to.
    """
    try:
        default_org = store.organizations().default_organization()
    except StoreError as exc:
        raise _unknown_error(str(exc)) from exc

    try:
        validate_layout(layout, default_org.id)
    except LayoutValidationError as exc:
        logger.warning("Invalid layout %r: %s", layout, exc)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc

    return effective_organization(layout, default_org.id)


@router.post(
    "",
    response_model=LayoutResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_layout(
    request: Request, response: Response, store: Store = Depends(get_store)
) -> LayoutResponse:
    """Validate and store a new layout."""
    layout = await _decode_layout(request)
    organization = _validate(store, layout)

    try:
        layout = store.layouts().add(layout)
    except StoreError as exc:
        raise _unknown_error(f"Error storing layout {layout!r}: {exc}") from exc

    logger.info("Created layout %s for organization %s", layout.id, organization)
    res = build_layout_response(layout)
    response.headers["Location"] = res.link.href
    return res


@router.get("", response_model=LayoutsResponse, response_model_exclude_none=True)
def list_layouts(
    app: list[str] = Query(default=[]),
    measurement: list[str] = Query(default=[]),
    store: Store = Depends(get_store),
) -> LayoutsResponse:
    """List stored layouts, optionally restricted to apps or measurements."""
    terms = filter_terms(app, measurement)

    try:
        layouts = store.layouts().all()
    except StoreError as exc:
        logger.error("Error loading layouts: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error loading layouts",
        ) from exc

    return build_layouts_response(select_layouts(layouts, terms))


@router.get(
    "/{layout_id}", response_model=LayoutResponse, response_model_exclude_none=True
)
def get_layout(
    layout_id: str, store: Store = Depends(get_store)
) -> LayoutResponse:
    """Fetch a single layout by ID."""
    try:
        layout = store.layouts().get(layout_id)
    except StoreError as exc:
        raise _not_found(layout_id) from exc

    return build_layout_response(layout)


@router.put(
    "/{layout_id}", response_model=LayoutResponse, response_model_exclude_none=True
)
async def update_layout(
    layout_id: str, request: Request, store: Store = Depends(get_store)
) -> LayoutResponse:
    """Replace the layout stored under ``layout_id``.

    The ID in the path wins over any ID in the body.
    """
    try:
        store.layouts().get(layout_id)
    except StoreError as exc:
        raise _not_found(layout_id) from exc

    layout = await _decode_layout(request)
    layout.id = layout_id
    organization = _validate(store, layout)

    try:
        store.layouts().update(layout)
    except StoreError as exc:
        message = f"Error updating layout ID {layout_id}: {exc}"
        logger.error(message)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=message
        ) from exc

    logger.info("Updated layout %s for organization %s", layout_id, organization)
    return build_layout_response(layout)


@router.delete("/{layout_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_layout(layout_id: str, store: Store = Depends(get_store)) -> Response:
    """Remove the layout stored under ``layout_id``."""
    try:
        store.layouts().delete(Layout(id=layout_id))
    except StoreError as exc:
        raise _unknown_error(str(exc)) from exc

    logger.info("Deleted layout %s", layout_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
