"""Shared plumbing for the operation services.

Each operation category (creation, access, analysis, ...) is a mixin built on
`BaseService`. The client composes all of them, so every mixin shares the
same adapter and transport and hands itself to decoded handles as their
client.
"""

from collections.abc import Callable
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict
import requests

from img_processing.core.infrastructure.adapters.http_adapter import HttpAdapterProtocol
from img_processing.core.infrastructure.http.transport import Transport
from img_processing.core.models.image import ImageObject
from img_processing.core.utils.constants import image_path

ModelT = TypeVar("ModelT", bound=BaseModel)

# Numbers are sent as given; the API decides whether fractions are allowed
Number = int | float


class RequestModel(BaseModel):
    """Base for request bodies.

    Request models only shape the payload. Value constraints are enforced by
    the API so that rejections surface as structured API errors.
    """

    model_config = ConfigDict(populate_by_name=True)

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class BaseService:
    """Common request helpers shared by every operation mixin."""

    _adapter: HttpAdapterProtocol
    _transport: Transport

    def _context(self) -> dict[str, Any]:
        return {"client": self}

    def _request(
        self,
        call: Callable[[], requests.Response],
        *,
        model: type[ModelT],
    ) -> ModelT:
        return self._transport.execute(call, model=model, context=self._context())

    def _image_request(
        self,
        call: Callable[[], requests.Response],
        *,
        model: type[ImageObject[Any]] = ImageObject,
    ) -> ImageObject[Any]:
        return self._request(call, model=model)

    def _image_operation(
        self,
        image_id: str,
        operation: str,
        request: RequestModel,
        *,
        model: type[ImageObject[Any]] = ImageObject,
    ) -> ImageObject[Any]:
        """POST `request` to `v1/images/{image_id}/{operation}` and decode the new image."""
        path = image_path(image_id, operation)
        return self._image_request(
            lambda: self._adapter.post(path, json=request.to_payload()),
            model=model,
        )
