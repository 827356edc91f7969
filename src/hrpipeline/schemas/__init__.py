"""Pydantic schemas for request/response validation."""

from hrpipeline.schemas.rfmt import (
    RFMTCreate,
    RFMTUpdate,
    RFMTResponse,
    RFMTListResponse,
    UkerSchema,
)
from hrpipeline.schemas.imports import ImportStartResponse, ImportProgressResponse
from hrpipeline.schemas.common import MessageResponse

__all__ = [
    "RFMTCreate",
    "RFMTUpdate",
    "RFMTResponse",
    "RFMTListResponse",
    "UkerSchema",
    "ImportStartResponse",
    "ImportProgressResponse",
    "MessageResponse",
]
