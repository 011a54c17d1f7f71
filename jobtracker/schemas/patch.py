from typing import ClassVar

from pydantic import BaseModel, model_validator


class PatchModel(BaseModel):
    """
    Base for PATCH bodies. Every field is optional, but fields named in
    not_null back NOT NULL columns: they may be omitted, not sent as null.
    """

    not_null: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="after")
    def reject_null_for_required_columns(self):
        nulled = [name for name in self.not_null if name in self.model_fields_set and getattr(self, name) is None]
        if nulled:
            raise ValueError(f"{', '.join(nulled)} cannot be null")
        return self
