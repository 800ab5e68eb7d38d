"""Organization model used to resolve the default tenant."""

from pydantic import BaseModel, ConfigDict, Field


class Organization(BaseModel):
    """A tenant that owns layouts."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str = ""
    default_role: str = Field(default="", alias="defaultRole")
