import pytest
import requests

from img_processing import ClientConfig, ConfigurationError, ImgProcessingClient
from img_processing.core.utils.constants import (
    DEFAULT_BASE_URL,
    ENV_API_KEY,
    ENV_BASE_URL,
    ENV_TIMEOUT,
)


class TestClientConstruction:
    def test_defaults(self, session) -> None:
        client = ImgProcessingClient("live_abc123", session=session)

        assert client.config.base_url == DEFAULT_BASE_URL
        assert client.config.timeout is None
        assert "x-api-key" not in session.headers

    @pytest.mark.parametrize("api_key", ["abc123", "prod_abc123", "", "   "])
    def test_malformed_key_fails_before_any_request(self, session, api_key) -> None:
        with pytest.raises(ConfigurationError) as exc:
            ImgProcessingClient(api_key, session=session)

        assert exc.value.error_code == "CONFIGURATION_ERROR"
        assert exc.value.details["errors"][0]["field"] == "api_key"
        session.request.assert_not_called()

    def test_error_details_never_contain_the_key(self, session) -> None:
        with pytest.raises(ConfigurationError) as exc:
            ImgProcessingClient("secret_abc123", session=session)

        assert "secret_abc123" not in str(exc.value.details)

    def test_invalid_timeout(self, session) -> None:
        with pytest.raises(ConfigurationError) as exc:
            ImgProcessingClient("test_abc123", timeout=0, session=session)

        assert exc.value.details["errors"][0]["field"] == "timeout"

    def test_from_config(self, session) -> None:
        config = ClientConfig(api_key="test_abc123", base_url="http://localhost:8080")

        client = ImgProcessingClient.from_config(config, session=session)

        assert client.config is config
        assert client.config.base_url == "http://localhost:8080/"

    def test_repr_hides_the_key(self, client) -> None:
        assert "test_0123456789abcdef" not in repr(client)
        assert DEFAULT_BASE_URL in repr(client)


class TestClientFromEnv:
    def test_reads_environment(self, monkeypatch, session) -> None:
        monkeypatch.setenv(ENV_API_KEY, "live_from_env")
        monkeypatch.setenv(ENV_BASE_URL, "http://localhost:9000")
        monkeypatch.setenv(ENV_TIMEOUT, "2.5")

        client = ImgProcessingClient.from_env(session=session)

        assert client.config.api_key == "live_from_env"
        assert client.config.base_url == "http://localhost:9000/"
        assert client.config.timeout == 2.5

    def test_missing_key(self, monkeypatch) -> None:
        monkeypatch.delenv(ENV_API_KEY, raising=False)

        with pytest.raises(ConfigurationError):
            ImgProcessingClient.from_env()

    def test_unparsable_timeout(self, monkeypatch) -> None:
        monkeypatch.setenv(ENV_API_KEY, "live_from_env")
        monkeypatch.setenv(ENV_TIMEOUT, "soon")

        with pytest.raises(ConfigurationError):
            ImgProcessingClient.from_env()


class TestClientLifecycle:
    def test_context_manager_closes_own_session(self, monkeypatch) -> None:
        closed = []
        monkeypatch.setattr(requests.Session, "close", lambda self: closed.append(self))

        with ImgProcessingClient("test_abc123") as client:
            assert isinstance(client, ImgProcessingClient)

        assert closed == [client._adapter._session]

    def test_context_manager_leaves_injected_session_open(self, monkeypatch) -> None:
        session = requests.Session()
        closed = []
        monkeypatch.setattr(session, "close", lambda: closed.append(True))

        with ImgProcessingClient("test_abc123", session=session):
            pass

        assert closed == []
        assert "x-api-key" not in session.headers

    def test_handles_share_the_client(self, image, client) -> None:
        assert image._client is client
