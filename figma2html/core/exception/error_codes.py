from enum import Enum


class ErrorCode(Enum):
    INVALID_INPUT = ("Invalid input: root node is null or undefined", 400)
    INVALID_FIGMA_URL = ("Could not extract a file key from the Figma URL", 400)
    MISSING_TOKEN = (
        "Figma API token is required. Set FIGMA_API_TOKEN or pass a token",
        401,
    )
    FIGMA_FORBIDDEN = ("Access to the Figma file was denied", 403)
    FIGMA_NOT_FOUND = ("Figma file or node not found", 404)
    FIGMA_RATE_LIMITED = ("Figma API rate limit exceeded", 429)
    FIGMA_API_ERROR = ("Failed to fetch Figma file", 502)
    INTERNAL_SERVER_ERROR = ("Internal server error", 500)

    def __init__(self, message: str, status_code: int):
        self.message = message
        self.status_code = status_code
