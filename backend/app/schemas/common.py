"""
Shared Schemas
"""
from pydantic import BaseModel
from typing import Union


class DeleteResponse(BaseModel):
    """Identifier of the deleted resource"""
    deleted: Union[int, str]


class ErrorDetail(BaseModel):
    message: str
    status: int


class ErrorResponse(BaseModel):
    """Body of every error response"""
    error: ErrorDetail


# documented on every router; the body is always an ErrorResponse
ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid request"},
    401: {"model": ErrorResponse, "description": "Not authenticated"},
    403: {"model": ErrorResponse, "description": "Not allowed"},
    404: {"model": ErrorResponse, "description": "Not found"},
}
