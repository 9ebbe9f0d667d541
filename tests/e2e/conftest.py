"""
Fixtures for the tests calling the live IMG Processing API.

These tests are skipped unless IMG_PROCESSING_API_KEY holds a valid key.
Images created during a test are deleted afterwards.
"""

import os

from aws_lambda_powertools import Logger
import pytest

from img_processing import ImageObject, ImgProcessingClient, ImgProcessingError
from img_processing.core.utils.constants import ENV_API_KEY, SERVICE_NAME

logger = Logger(service=SERVICE_NAME, utc=True)

SAMPLE_IMAGE_URL = os.getenv(
    "IMG_PROCESSING_E2E_IMAGE_URL",
    "https://storage.img-processing.com/og-image.jpg",
)


def pytest_collection_modifyitems(config, items) -> None:
    if os.getenv(ENV_API_KEY):
        return
    skip = pytest.mark.skip(reason=f"{ENV_API_KEY} is not set")
    for item in items:
        if "e2e" in item.keywords:
            item.add_marker(skip)


# ============================================================================
# Client Fixtures
# ============================================================================


@pytest.fixture(scope="session")
def live_client():
    """Client built from the IMG_PROCESSING_* environment variables."""
    with ImgProcessingClient.from_env() as _client:
        yield _client


@pytest.fixture
def created_images():
    """
    Helper to register images deleted once the test ends.

    Usage:
        image = created_images(live_client.create_image_from_url(...))
    """
    images: list[ImageObject] = []

    def _track(image: ImageObject) -> ImageObject:
        images.append(image)
        return image

    yield _track

    for image in images:
        try:
            image.delete()
        except ImgProcessingError as err:
            logger.warning(
                "Failed to delete e2e image",
                extra={"image_id": image.id, "error": str(err)},
            )


@pytest.fixture
def sample_image_url() -> str:
    return SAMPLE_IMAGE_URL


@pytest.fixture
def sample_image(live_client, created_images, sample_image_url) -> ImageObject:
    return created_images(
        live_client.create_image_from_url(url=sample_image_url, name="test_image")
    )
