"""
Standardized API response models and utilities.
Provides consistent response formatting across all endpoints.
"""

from typing import Generic, TypeVar, Optional, Any, List
from pydantic import BaseModel, Field

T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    """Generic API response wrapper"""

    status: str = Field("success", description="'success' or 'error'")
    message: Optional[str] = Field(None, description="Human-readable message")
    data: Optional[T] = Field(None, description="Response payload")

    model_config = {"from_attributes": True}


class PaginatedResponse(BaseModel, Generic[T]):
    """Paginated API response with the page under 'results'"""

    status: str = Field("success")
    message: Optional[str] = None
    results: List[T] = Field(..., description="Items on this page")
    page: int = Field(..., description="Current page number")
    limit: int = Field(..., description="Maximum number of items per page")
    total_pages: int = Field(..., serialization_alias="totalPages")
    total_results: int = Field(..., serialization_alias="totalResults")

    model_config = {"populate_by_name": True}


class PaginatedDataResponse(BaseModel, Generic[T]):
    """Paginated API response with the page under 'data'"""

    status: str = Field("success")
    message: Optional[str] = None
    data: List[T] = Field(..., description="Items on this page")
    page: int
    limit: int
    total_pages: int = Field(..., serialization_alias="totalPages")
    total_results: int = Field(..., serialization_alias="totalResults")

    model_config = {"populate_by_name": True}


class ErrorResponse(BaseModel):
    """Standardized error response"""

    status: str = Field("error", description="Always 'error'")
    code: int = Field(..., description="HTTP status code")
    message: str = Field(..., description="Error message")
    details: Optional[Any] = Field(None, description="Additional error details")


class HealthResponse(BaseModel):
    """Health check response"""

    status: str = Field(..., description="Service status")
    service: str = Field(..., description="Service name")
    version: Optional[str] = Field(None, description="Service version")
    database: Optional[str] = Field(None, description="Database connectivity")


def total_pages(total_results: int, limit: int) -> int:
    """Integer division plus one, as reported to admin clients"""
    return total_results // limit + 1


def success_response(data: Any = None, message: str = None) -> dict:
    """Create a standardized success response"""
    return {"status": "success", "message": message, "data": data}


def error_response(code: int, message: str, details: Any = None) -> dict:
    """Create a standardized error response"""
    payload = {"status": "error", "code": code, "message": message}
    if details:
        payload["details"] = details
    return payload


def paginated_response(
    items: List[Any],
    total: int,
    page: int,
    limit: int,
    message: str = None,
    items_key: str = "results",
) -> dict:
    """Create a standardized paginated response"""
    return {
        "status": "success",
        "message": message,
        items_key: items,
        "page": page,
        "limit": limit,
        "total_pages": total_pages(total, limit),
        "total_results": total,
    }
