"""
Configuration management for heurist-mesh
Environment-based configuration via pydantic-settings
"""
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from heurist_mesh.errors import ConfigurationError
from heurist_mesh.mesh.client import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_S, MeshClient


class Settings(BaseSettings):
    """Application settings from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Mesh service
    heurist_api_key: Optional[str] = None
    mesh_base_url: str = DEFAULT_BASE_URL
    mesh_timeout_s: float = DEFAULT_TIMEOUT_S

    # Logging
    debug: bool = False

    def require_api_key(self) -> str:
        """Return the API key or raise before any network call is made."""
        key = (self.heurist_api_key or "").strip()
        if not key:
            raise ConfigurationError("Environment validation failed: HEURIST_API_KEY is required")
        return key

    def build_client(self) -> MeshClient:
        """Build a MeshClient from the configured key, URL and timeout."""
        return MeshClient(
            self.require_api_key(),
            base_url=self.mesh_base_url,
            timeout_s=self.mesh_timeout_s,
        )


# Global settings instance
settings = Settings()
