"""Pagination models."""

from collections.abc import Iterator
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, ValidationInfo, model_validator

from img_processing.core.models.errors import ConfigurationError
from img_processing.core.models.image import ImageObject

if TYPE_CHECKING:
    from img_processing.client import ImgProcessingClient


class PaginationLinks(BaseModel):
    """Opaque links to the neighbouring pages.

    The links are absolute URLs issued by the API. They are only meaningful
    to the client that received them and must not be built or parsed by
    callers.
    """

    model_config = ConfigDict(frozen=True)

    previous: str | None = Field(None, description="Link to the previous page, if any")
    next: str | None = Field(None, description="Link to the next page, if any")


class PaginatedImages(BaseModel):
    """One page of images, newest first.

    A page never changes once received: `next()` and `previous()` always
    return a brand-new page, or None when there is nothing to fetch.
    """

    model_config = ConfigDict(frozen=True)

    data: list[ImageObject] = Field(..., description="Images of the current page")
    links: PaginationLinks = Field(
        default_factory=PaginationLinks,
        description="Links to the previous and next pages",
    )

    _client: "ImgProcessingClient | None" = PrivateAttr(default=None)

    @model_validator(mode="after")
    def bind_client(self, info: ValidationInfo) -> "PaginatedImages":
        if info.context and info.context.get("client") is not None:
            self._client = info.context["client"]
        return self

    def __iter__(self) -> Iterator[ImageObject]:  # type: ignore[override]
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)

    @property
    def has_next(self) -> bool:
        return bool(self.links.next)

    @property
    def has_previous(self) -> bool:
        return bool(self.links.previous)

    def next(self) -> "PaginatedImages | None":
        """Return the next page, or None when this is the last page."""
        if not self.links.next:
            return None
        return self._bound_client().go_to_page(page=self.links.next)

    def previous(self) -> "PaginatedImages | None":
        """Return the previous page, or None when this is the first page."""
        if not self.links.previous:
            return None
        return self._bound_client().go_to_page(page=self.links.previous)

    def iter_pages(self) -> Iterator["PaginatedImages"]:
        """Yield this page, then every following page until the last one."""
        page: PaginatedImages | None = self
        while page is not None:
            yield page
            page = page.next()

    def _bound_client(self) -> "ImgProcessingClient":
        if self._client is None:
            raise ConfigurationError(message="Page is not bound to a client")
        return self._client
