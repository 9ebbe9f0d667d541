"""Request execution and failure classification.

Every request issued by the client goes through `Transport`, the only place
where failures are classified:

- non-2xx responses with a body matching `ErrorResponse` become `APIError`
- anything else (network failures, timeouts, malformed bodies) is logged and
  re-raised as `UnexpectedError`
"""

from collections.abc import Callable, Mapping
from typing import Any, TypeVar, overload

from aws_lambda_powertools import Logger
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
import requests

from img_processing.core.models.errors import (
    APIError,
    ErrorResponse,
    ImgProcessingError,
    UnexpectedError,
)
from img_processing.core.utils.constants import SERVICE_NAME

logger = Logger(service=SERVICE_NAME, utc=True)

ModelT = TypeVar("ModelT", bound=BaseModel)

RequestCall = Callable[[], requests.Response]


class Transport:
    """Executes request calls exactly once and normalizes their failures."""

    @overload
    def execute(self, call: RequestCall) -> Any: ...

    @overload
    def execute(
        self,
        call: RequestCall,
        *,
        model: type[ModelT],
        context: Mapping[str, Any] | None = None,
    ) -> ModelT: ...

    def execute(
        self,
        call: RequestCall,
        *,
        model: type[BaseModel] | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> Any:
        """Run `call` and decode its JSON body.

        Args:
            call: Zero-argument callable issuing exactly one request
            model: Optional pydantic model the JSON body is validated into
            context: Validation context forwarded to the model validators

        Returns:
            The decoded JSON body, or an instance of `model`

        Raises:
            APIError: If the API answered with a structured error body
            UnexpectedError: For any other failure
        """
        response = self._send(call)

        try:
            payload = response.json()
            if model is None:
                return payload
            return model.model_validate(payload, context=dict(context or {}))
        except (ValueError, PydanticValidationError) as exc:
            logger.exception(
                "Malformed response body",
                extra=self._response_context(response),
            )
            raise UnexpectedError(
                details={**self._response_context(response), "error_type": type(exc).__name__},
            ) from exc

    def execute_binary(self, call: RequestCall) -> bytes:
        """Run `call` and return the raw response body."""
        return self._send(call).content

    def execute_no_content(self, call: RequestCall) -> None:
        """Run `call` and discard whatever body the API returned."""
        self._send(call)

    def _send(self, call: RequestCall) -> requests.Response:
        try:
            return call()

        # Already classified, never wrap twice
        except ImgProcessingError:
            raise

        except requests.HTTPError as exc:
            raise self._to_api_error(exc) from exc

        except Exception as exc:
            logger.exception(
                "Unexpected error calling the IMG Processing API",
                extra={"error": str(exc), "error_type": type(exc).__name__},
            )
            raise UnexpectedError(details={"error_type": type(exc).__name__}) from exc

    def _to_api_error(self, exc: requests.HTTPError) -> ImgProcessingError:
        """Translate an HTTP error response into the matching client error."""
        response = exc.response
        if response is None:
            logger.exception("HTTP error without a response", extra={"error": str(exc)})
            return UnexpectedError(details={"error_type": type(exc).__name__})

        try:
            body = ErrorResponse.model_validate(response.json())
        except (ValueError, PydanticValidationError):
            logger.exception(
                "Error response without a structured body",
                extra=self._response_context(response),
            )
            return UnexpectedError(details=self._response_context(response))

        error = APIError.from_response(body)
        logger.warning(
            "API rejected the request",
            extra={
                **self._response_context(response),
                "error_type": error.type,
                "error": error.error,
            },
        )
        return error

    @staticmethod
    def _response_context(response: requests.Response) -> dict[str, Any]:
        return {"status": response.status_code, "url": response.url}
