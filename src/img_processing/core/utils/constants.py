"""Global constants used throughout the client.

This module centralizes the literals shared across modules: error codes,
endpoint paths, identifier prefixes, supported formats and environment
variable names.
"""

from typing import Final

# ============================================================================
# Error Codes
# ============================================================================

# Client-side errors
ERROR_CODE_CONFIGURATION = "CONFIGURATION_ERROR"
ERROR_CODE_UNEXPECTED = "UNEXPECTED_ERROR"

# Structured API errors (used when the server omits a type)
ERROR_CODE_API = "API_ERROR"
ERROR_CODE_VALIDATION_FAILED = "VALIDATION_ERROR"
ERROR_CODE_AUTHENTICATION_FAILED = "AUTHENTICATION_ERROR"
ERROR_CODE_RESOURCE_NOT_FOUND = "NOT_FOUND"
ERROR_CODE_RATE_LIMITED = "RATE_LIMITED"

UNEXPECTED_ERROR_MESSAGE = (
    "An unexpected error occurred while talking to the IMG Processing API"
)

# ============================================================================
# API Configuration
# ============================================================================

SERVICE_NAME = "img-processing"

DEFAULT_BASE_URL = "https://api.img-processing.com/"
API_KEY_HEADER = "x-api-key"
API_KEY_PREFIXES: Final[tuple[str, ...]] = ("live_", "test_")

# ============================================================================
# Endpoints
# ============================================================================

IMAGES_PATH = "v1/images"
UPLOAD_PATH = f"{IMAGES_PATH}/upload"
IMAGINE_PATH = f"{IMAGES_PATH}/imagine"


def image_path(image_id: str, operation: str | None = None) -> str:
    """Build the relative path of an image, optionally scoped to an operation.

    Example:
        image_path("image_abc", "resize") -> "v1/images/image_abc/resize"
    """
    path = f"{IMAGES_PATH}/{image_id}"
    if operation:
        path = f"{path}/{operation}"
    return path


# ============================================================================
# Images
# ============================================================================

IMAGE_ID_PREFIX = "image_"
IMAGE_ID_PATTERN = r"^image_[A-Za-z0-9]+$"

SUPPORTED_FORMATS: Final[frozenset[str]] = frozenset({"jpeg", "png", "webp"})
LOSSLESS_FORMAT = "png"

DEFAULT_UPLOAD_FILENAME = "image"
FALLBACK_MIME_TYPE = "application/octet-stream"

# ============================================================================
# Environment Variable Names
# ============================================================================

ENV_API_KEY = "IMG_PROCESSING_API_KEY"
ENV_BASE_URL = "IMG_PROCESSING_BASE_URL"
ENV_TIMEOUT = "IMG_PROCESSING_TIMEOUT"
