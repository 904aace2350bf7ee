# now_playing_proxy/api/errors.py
from fastapi.responses import JSONResponse


def error_response(status: int, error: str, message: str | None = None) -> JSONResponse:
    """Every error leaves the API as ``{"error": ..., "message": ...}``."""
    payload = {"error": error}
    if message is not None:
        payload["message"] = message
    return JSONResponse(payload, status_code=status)


def auth_required() -> JSONResponse:
    return error_response(401, "Authentication required", "Please visit /login first")
