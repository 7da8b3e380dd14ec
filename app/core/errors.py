from typing import Any, Dict

from fastapi import HTTPException, status


class APIError(HTTPException):
    """Error carrying the message shown to the client; the cause is logged, not returned."""

    def __init__(self, status_code: int, message: str):
        super().__init__(status_code=status_code, detail=message)
        self.message = message


class ValidationError(APIError):
    def __init__(self, message: str):
        super().__init__(status.HTTP_400_BAD_REQUEST, message)


class ConfigurationError(APIError):
    def __init__(self, message: str = "Server is not configured"):
        super().__init__(status.HTTP_500_INTERNAL_SERVER_ERROR, message)


class UpstreamError(APIError):
    def __init__(self, message: str = "Upstream completion failed"):
        super().__init__(status.HTTP_500_INTERNAL_SERVER_ERROR, message)


class StorageError(APIError):
    def __init__(self, message: str = "Storage operation failed"):
        super().__init__(status.HTTP_500_INTERNAL_SERVER_ERROR, message)


def error_content(message: str) -> Dict[str, Any]:
    return {"error": message}
