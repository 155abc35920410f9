"""Shared pydantic base for step and run records."""

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Immutable record; step data is never changed after it is reported.

    Unknown fields are rejected so a misspelled key in a recorded run
    (e.g. ``removal_note``) fails loudly instead of hiding a row.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")
