"""
FastAPI router definitions for the API endpoints.
"""

from fastapi import APIRouter, HTTPException, Query

from minibash.api.dependencies import get_list_directory_uc
from minibash.api.schemas import ErrorResponse, ListingResponse
from minibash.entities.listing import ListingOptions
from minibash.exceptions import (
    InvalidNameError,
    ListError,
    NotFoundError,
    PermissionDeniedError,
)

router = APIRouter()


def _status_for(error: ListError) -> int:
    if isinstance(error, NotFoundError):
        return 404
    if isinstance(error, PermissionDeniedError):
        return 403
    if isinstance(error, InvalidNameError):
        return 400
    return 500


@router.get(
    "/ls",
    response_model=ListingResponse,
    responses={
        400: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def list_directory(
    path: str = Query(".", description="File or directory to list"),
    almost_all: bool = Query(
        False, description="Include entries whose names begin with a dot"
    ),
    time: bool = Query(False, description="Sort by descending modification time"),
):
    """
    List a file or directory.

    Args:
        path: File or directory to list
        almost_all: Include dotfiles, except '.' and '..'
        time: Sort newest first instead of by name

    Returns:
        ListingResponse: The listed names

    Raises:
        HTTPException: If the path cannot be listed
    """
    options = ListingOptions(show_hidden=almost_all, sort_by_time=time)
    try:
        result = get_list_directory_uc().execute(path, options)
    except ListError as e:
        raise HTTPException(status_code=_status_for(e), detail=str(e))
    return ListingResponse.from_result(path, result)
