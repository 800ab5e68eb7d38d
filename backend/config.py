"""Application configuration."""

from pydantic import BaseModel


class Settings(BaseModel):
    """Application settings."""

    app_name: str = "Dashboard Layout API"
    app_version: str = "0.1.0"
    debug: bool = False
    cors_origins: list[str] = ["http://localhost:8888"]
    api_prefix: str = "/chronograf/v1"
    log_level: str = "INFO"

    # Organization used when a layout does not name one
    default_organization_id: str = "default"
    default_organization_name: str = "Default"

    @property
    def layouts_path(self) -> str:
        return f"{self.api_prefix}/layouts"


settings = Settings()
