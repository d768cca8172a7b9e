from pydantic import BaseModel, Field

INVALID_BUDGET_MESSAGE = "A valid budget is required."
PIPELINE_FAILURE_MESSAGE = "Failed to fetch API data."


class ErrorResponse(BaseModel):
    """Error body shared by the 400 and 500 responses."""

    error: str = Field(..., description="Human-readable error message")


class HealthResponse(BaseModel):
    status: str
    service: str
