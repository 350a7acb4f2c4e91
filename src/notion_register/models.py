"""Request model for a single page registration."""

from pydantic import BaseModel, ConfigDict


class RegistrationRequest(BaseModel):
    """A new database row: target database plus the row's title.

    The title is kept verbatim; empty strings and any characters are allowed.
    """

    model_config = ConfigDict(frozen=True)

    database_id: str
    title: str
