"""
Shared Request/Response Models
"""

from pydantic import BaseModel


class CreatedResponse(BaseModel):
    """Returned by every create endpoint"""
    id: str


class DeleteRequest(BaseModel):
    """Body of every delete endpoint"""
    id: str = ""


class ErrorResponse(BaseModel):
    """Error envelope"""
    code: int
    message: str
