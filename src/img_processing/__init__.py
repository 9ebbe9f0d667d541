"""IMG Processing API client package."""

from img_processing.client import ImgProcessingClient
from img_processing.core.models.analysis import (
    ClassificationResult,
    LabelScore,
    VisualizationResult,
)
from img_processing.core.models.errors import (
    APIError,
    AuthenticationError,
    ConfigurationError,
    ErrorResponse,
    ImgProcessingError,
    NotFoundError,
    RateLimitError,
    UnexpectedError,
    ValidationError,
)
from img_processing.core.models.image import ImageObject, SupportedFormat
from img_processing.core.models.pagination import PaginatedImages, PaginationLinks
from img_processing.core.utils.config import ClientConfig
from img_processing.operations.creation.models import ImageFile
from img_processing.operations.multi_image.models import Watermark

__version__ = "1.0.0"

__all__ = [
    "APIError",
    "AuthenticationError",
    "ClassificationResult",
    "ClientConfig",
    "ConfigurationError",
    "ErrorResponse",
    "ImageFile",
    "ImageObject",
    "ImgProcessingClient",
    "ImgProcessingError",
    "LabelScore",
    "NotFoundError",
    "PaginatedImages",
    "PaginationLinks",
    "RateLimitError",
    "SupportedFormat",
    "UnexpectedError",
    "ValidationError",
    "VisualizationResult",
    "Watermark",
]
