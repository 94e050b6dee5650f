"""Book schemas."""

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field

# Field values are stored verbatim, so the models accept any JSON value while
# the OpenAPI document still advertises strings.
Text = Annotated[Any, Field(json_schema_extra={"type": "string"})]
Date = Annotated[
    Any,
    Field(
        alias="publishedDate",
        json_schema_extra={"type": "string", "format": "date"},
    ),
]


class BookInput(BaseModel):
    """Request body for creating or replacing a book.

    Every field is optional and unknown keys are ignored.
    """

    model_config = ConfigDict(extra="ignore")

    title: Text = None
    author: Text = None
    published_date: Date = None
    summary: Text = None

    def supplied(self) -> dict[str, Any]:
        """Fields present in the request body, keyed by attribute name."""
        return self.model_dump(exclude_unset=True)


class Book(BaseModel):
    """A stored book.

    Fields that were never supplied stay unset rather than null and are left
    out of responses.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(description="The auto generated id of the book")
    title: Text = None
    author: Text = None
    published_date: Date = None
    summary: Text = None


class BookEnvelope(BaseModel):
    """A message together with the book it refers to."""

    message: str
    body: Book


class MessageResponse(BaseModel):
    """Plain message body, used for confirmations and errors."""

    message: str
