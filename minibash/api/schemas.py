"""
Pydantic models for API requests and responses.
"""

from typing import List, Literal

from pydantic import BaseModel, Field

from minibash.entities.listing import ListingResult, SingleListing


class ListingResponse(BaseModel):
    """Schema for a listing response."""

    kind: Literal["single", "directory"] = Field(
        ..., description="'single' when the path is a file, 'directory' otherwise"
    )
    path: str = Field(..., description="Path that was listed")
    names: List[str] = Field(..., description="Entry names in display order")

    @classmethod
    def from_result(cls, path: str, result: ListingResult):
        """Create a ListingResponse schema from a listing result."""
        kind = "single" if isinstance(result, SingleListing) else "directory"
        return cls(kind=kind, path=path, names=list(result.names))


class ErrorResponse(BaseModel):
    """Schema for error responses."""

    detail: str = Field(..., description="Error message")
