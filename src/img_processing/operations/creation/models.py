"""Pydantic models for the image creation endpoints."""

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from img_processing.core.utils.constants import DEFAULT_UPLOAD_FILENAME, FALLBACK_MIME_TYPE
from img_processing.core.utils.mime import detect_mime_type
from img_processing.operations.base import Number, RequestModel


class ImageFile(BaseModel):
    """Binary image content with its declared media type.

    Build one directly to control the declared type; `from_bytes` and
    `from_path` sniff it from the content instead.
    """

    model_config = ConfigDict(frozen=True)

    content: bytes = Field(..., description="Raw image bytes")
    mime_type: str = Field(FALLBACK_MIME_TYPE, description="Declared media type")
    filename: str | None = Field(None, description="File name sent in the multipart body")

    @classmethod
    def from_bytes(cls, content: bytes, filename: str | None = None) -> "ImageFile":
        """Wrap raw bytes, declaring the sniffed type.

        Unrecognized content is declared as `application/octet-stream` and
        left to the API to reject.
        """
        mime_type = detect_mime_type(content)
        if filename is None and mime_type:
            filename = f"{DEFAULT_UPLOAD_FILENAME}.{mime_type.split('/')[-1]}"
        return cls(
            content=content,
            mime_type=mime_type or FALLBACK_MIME_TYPE,
            filename=filename,
        )

    @classmethod
    def from_path(cls, path: str | os.PathLike[str]) -> "ImageFile":
        file_path = Path(path)
        return cls.from_bytes(file_path.read_bytes(), filename=file_path.name)


class UploadImageRequest(RequestModel):
    """Multipart upload request."""

    name: str | None = Field(None, description="Name of the new image")
    image: ImageFile = Field(..., description="Image content")

    def form_fields(self) -> dict[str, str]:
        return {"name": self.name} if self.name is not None else {}

    def files(self) -> dict[str, tuple[str, bytes, str]]:
        return {
            "image": (
                self.image.filename or DEFAULT_UPLOAD_FILENAME,
                self.image.content,
                self.image.mime_type,
            )
        }


class CreateImageFromUrlRequest(RequestModel):
    url: str = Field(..., description="URL of the image to download, from an allowed origin")
    name: str | None = Field(None, description="Name of the new image")


class ImagineRequest(RequestModel):
    prompt: str = Field(..., description="Description of the image to generate")
    negative_prompt: str | None = Field(None, description="Things to avoid in the image")
    name: str | None = Field(None, description="Name of the new image")
    seed: Number | None = Field(None, description="Seed for reproducible generations")
