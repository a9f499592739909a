"""Unit tests for heurist_mesh.config — Settings and client builder."""

import pytest

from heurist_mesh.config import Settings, settings
from heurist_mesh.errors import ConfigurationError
from heurist_mesh.mesh.client import MeshClient


class TestSettings:
    """Test Settings defaults using _env_file=None to isolate from local .env."""

    def test_defaults(self, monkeypatch):
        for name in ("HEURIST_API_KEY", "MESH_BASE_URL", "MESH_TIMEOUT_S", "DEBUG"):
            monkeypatch.delenv(name, raising=False)
        s = Settings(_env_file=None)
        assert s.heurist_api_key is None
        assert s.mesh_base_url == "https://sequencer-v2.heurist.xyz"
        assert s.mesh_timeout_s == 10.0
        assert s.debug is False

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("HEURIST_API_KEY", "env-key")
        monkeypatch.setenv("MESH_TIMEOUT_S", "3.5")
        s = Settings(_env_file=None)
        assert s.heurist_api_key == "env-key"
        assert s.mesh_timeout_s == 3.5


class TestRequireApiKey:
    def test_missing(self):
        with pytest.raises(ConfigurationError, match="HEURIST_API_KEY"):
            Settings(_env_file=None, heurist_api_key=None).require_api_key()

    def test_blank(self):
        with pytest.raises(ConfigurationError):
            Settings(_env_file=None, heurist_api_key="   ").require_api_key()

    def test_present(self):
        assert Settings(_env_file=None, heurist_api_key="k").require_api_key() == "k"


class TestBuildClient:
    def test_maps_values(self):
        s = Settings(
            _env_file=None,
            heurist_api_key="k",
            mesh_base_url="https://mesh.test/",
            mesh_timeout_s=2.0,
        )
        client = s.build_client()
        assert isinstance(client, MeshClient)
        assert client.api_key == "k"
        assert client.base_url == "https://mesh.test"
        assert client.timeout_s == 2.0

    def test_missing_key(self):
        with pytest.raises(ConfigurationError):
            Settings(_env_file=None, heurist_api_key="").build_client()


class TestGlobalSettings:
    def test_singleton_exists(self):
        assert isinstance(settings, Settings)
