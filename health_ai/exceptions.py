from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

def create_error_response(error_message: str, status_code: int = 400) -> dict:
    """Create a standardized error response"""
    return {
        "success": False,
        "data": None,
        "error": error_message
    }

def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    # Drop the leading "body"/"query" segment from the location
    location = ".".join(str(part) for part in first.get("loc", ())[1:])
    message = first.get("msg", "Invalid value")
    return f"{location}: {message}" if location else message

async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Custom exception handler for HTTPException"""
    return JSONResponse(
        status_code=exc.status_code,
        content=create_error_response(exc.detail, exc.status_code),
        headers=getattr(exc, "headers", None),
    )

async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Schema violations are client errors: 400 with the first problem as message"""
    return JSONResponse(
        status_code=400,
        content=create_error_response(_describe_validation_error(exc), 400)
    )
