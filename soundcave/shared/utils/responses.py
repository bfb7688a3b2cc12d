"""
Response envelopes shared by every module's endpoints.
"""

from pydantic import BaseModel


class PaginationMeta(BaseModel):
    page: int
    limit: int
    total: int
    total_pages: int


class MessageResponse(BaseModel):
    success: bool = True
    message: str
