"""Schemas for the analyze endpoint."""

from pydantic import BaseModel, Field


class AnalyzeRequest(BaseModel):
    """Request body for POST /api/analyze."""

    query: str = Field(..., description="Wallet address, transaction hash, or free-form question.")


class AnalyzeResponse(BaseModel):
    """Successful response for POST /api/analyze."""

    answer: str = Field(..., description="Text generated by the model.")


class ErrorResponse(BaseModel):
    """Error body returned with 4xx/5xx statuses."""

    error: str
