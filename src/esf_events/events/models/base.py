"""Base model shared by all bus events."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseEvent(BaseModel):
    """Immutable base for every event carried by the bus.

    Fields are snake_case in Python and camelCase on the wire
    (``project_number`` <-> ``projectNumber``). Either spelling is accepted
    on input; ``model_dump(by_alias=True)`` produces the wire shape.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )
