"""Shared pydantic base. The mobile client speaks camelCase JSON."""
from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }


class MessageOut(CamelModel):
    message: str
