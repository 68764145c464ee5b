"""Shared model settings for every input section."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class AssumptionModel(BaseModel):
    """Frozen input section.

    JSON keys use the calculator's camelCase shape (``analystFTEs``,
    ``governOS``); python attribute names are accepted as well.  No range
    checks are applied: negative amounts flow through the engine untouched.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )
