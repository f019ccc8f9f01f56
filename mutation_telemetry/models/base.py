from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class TelemetryModel(BaseModel):
    """Base model accepting both snake_case attributes and the editor's camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
