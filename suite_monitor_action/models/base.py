"""Base model configuration for all API data structures."""

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Base model with standard configuration.

    API payloads use camelCase keys, fields are declared in snake_case and
    populated through aliases. Unknown keys sent by the service are ignored.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")
