"""Value objects held by the configuration stores."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ConnectionStringEntry(BaseModel):
    """A named connection string and the provider it is meant for.

    Attributes:
        name: Name the entry is registered under
        connection_string: Connection string text (may be empty)
        provider_name: Optional data provider identifier
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(default="")
    connection_string: str = Field(default="")
    provider_name: Optional[str] = Field(default=None)
