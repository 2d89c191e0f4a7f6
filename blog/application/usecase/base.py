"""Shared use case models."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ResponseModel(BaseModel):
    """Base for use case responses.

    Fields are snake_case in Python and serialize as camelCase, which is
    the shape the browser client reads.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
