"""
Pydantic models for the access endpoints.
"""

from pydantic import Field

from img_processing.operations.base import RequestModel


class ListImagesRequest(RequestModel):
    """
    Query parameters of the list images API.

    No `take` and no `from` means the first page with the server default size.
    """

    take: int | None = Field(None, description="Number of images per page")
    from_: str | None = Field(
        None,
        alias="from",
        description="Opaque cursor of the first image of the page",
    )
