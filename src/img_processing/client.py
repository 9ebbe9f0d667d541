"""IMG Processing API client."""

from types import TracebackType

from aws_lambda_powertools import Logger
from pydantic import ValidationError as PydanticValidationError
import requests

from img_processing.core.infrastructure.adapters.http_adapter import HttpAdapter
from img_processing.core.infrastructure.http.transport import Transport
from img_processing.core.models.errors import ConfigurationError
from img_processing.core.utils.config import ClientConfig
from img_processing.core.utils.constants import DEFAULT_BASE_URL, SERVICE_NAME
from img_processing.operations.access.service import AccessService
from img_processing.operations.analysis.service import AnalysisService
from img_processing.operations.creation.service import CreationService
from img_processing.operations.edition.service import EditionService
from img_processing.operations.multi_image.service import MultiImageService
from img_processing.operations.transformation.service import TransformationService

logger = Logger(service=SERVICE_NAME, utc=True)


class ImgProcessingClient(
    CreationService,
    AccessService,
    AnalysisService,
    EditionService,
    MultiImageService,
    TransformationService,
):
    """Entry point of the IMG Processing API.

    The client is the only component issuing network calls. Every image it
    returns keeps a reference to it, so operations can be chained:

        client = ImgProcessingClient("live_...")
        image = client.upload_image(image="photo.jpg", name="photo")
        thumbnail = image.resize(width=200, height=200, fit="cover")

    The client holds no per-call state and can be shared across threads as
    far as the underlying `requests.Session` allows.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        """Create a client.

        Args:
            api_key: API key starting with `live_` or `test_`
            base_url: API root URL
            timeout: Per-request timeout in seconds, None keeps the transport default
            session: Optional pre-configured requests session

        Raises:
            ConfigurationError: If the API key or any setting is malformed
        """
        try:
            config = ClientConfig(api_key=api_key, base_url=base_url, timeout=timeout)
        except PydanticValidationError as exc:
            raise self._configuration_error(exc) from exc

        self._setup(config, session)

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        *,
        session: requests.Session | None = None,
    ) -> "ImgProcessingClient":
        client = cls.__new__(cls)
        client._setup(config, session)
        return client

    @classmethod
    def from_env(cls, *, session: requests.Session | None = None) -> "ImgProcessingClient":
        """Create a client from the IMG_PROCESSING_* environment variables."""
        try:
            config = ClientConfig.from_env()
        except PydanticValidationError as exc:
            raise cls._configuration_error(exc) from exc
        except ValueError as exc:
            raise ConfigurationError(message=str(exc)) from exc
        return cls.from_config(config, session=session)

    @property
    def config(self) -> ClientConfig:
        return self._config

    def close(self) -> None:
        """Release the HTTP session created by the client. An injected session stays open."""
        self._adapter.close()

    def __enter__(self) -> "ImgProcessingClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self._config.base_url!r})"

    def _setup(self, config: ClientConfig, session: requests.Session | None) -> None:
        self._config = config
        self._adapter = HttpAdapter(config, session)
        self._transport = Transport()
        logger.debug("Client configured", extra={"base_url": config.base_url})

    @staticmethod
    def _configuration_error(exc: PydanticValidationError) -> ConfigurationError:
        """Turn settings validation errors into a ConfigurationError.

        Only field names and messages are kept: the rejected values may
        contain the API key.
        """
        errors = [
            {
                "field": ".".join(str(x) for x in err.get("loc", [])) or "config",
                "message": err.get("msg", "Invalid value").replace("Value error,", "").strip(),
            }
            for err in exc.errors()
        ]
        return ConfigurationError(
            message="Invalid client configuration",
            details={"errors": errors},
        )
