"""Common schemas for API responses"""

from pydantic import BaseModel


class FieldErrorSchema(BaseModel):
    """Error attributed to a single form field"""

    field: str
    message: str


class ErrorResponse(BaseModel):
    """Standard error response schema"""

    success: bool = False
    message: str

    class Config:
        json_schema_extra = {
            "example": {
                "success": False,
                "message": "Invalid username/email or password",
            }
        }


class ValidationErrorResponse(BaseModel):
    """Field-level validation error response schema"""

    success: bool = False
    errors: list[FieldErrorSchema]

    class Config:
        json_schema_extra = {
            "example": {
                "success": False,
                "errors": [{"field": "username", "message": "Username already exists"}],
            }
        }


class HealthCheckResponse(BaseModel):
    """Health check response schema"""

    status: str = "healthy"
    app: str
    version: str
    timestamp: str

    class Config:
        json_schema_extra = {
            "example": {
                "status": "healthy",
                "app": "User Registration API",
                "version": "0.1.0",
                "timestamp": "2024-01-01T12:00:00Z",
            }
        }
