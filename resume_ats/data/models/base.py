"""
Base model classes for resume-ats data models.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class EmbeddedModel(BaseModel):
    """
    Base model for immutable value records.

    Attributes are snake_case in Python and camelCase when serialized, so a
    dump by alias carries the field names downstream consumers expect
    (``fullName``, ``workExperience``, ...).
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        validate_default=True,
        frozen=True,
    )
