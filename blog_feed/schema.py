"""Content collection schemas."""

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .exceptions import ContentValidationError

ROOT_FIELD = "<root>"


class BlogPostSchema(BaseModel):
    """Front matter every entry of the blog collection must declare."""

    model_config = ConfigDict(extra="ignore", strict=True)

    title: str
    description: str
    date: str
    author: str
    summary: str

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("title must not be empty")
        return value


# The key must match the collection's folder name
COLLECTIONS: dict[str, type[BaseModel]] = {
    "blog": BlogPostSchema,
}


def _field_name(loc: tuple) -> str:
    return ".".join(str(part) for part in loc) or ROOT_FIELD


def validate_entry(
    entry_id: str, data: Any, schema: type[BaseModel] = BlogPostSchema
) -> BaseModel:
    """Validate one raw content entry against a collection schema.

    Args:
        entry_id: Identity of the entry, used in error reports
        data: Parsed front matter of the entry
        schema: Schema model of the collection

    Returns:
        The validated schema instance

    Raises:
        ContentValidationError: If any field is missing or has the wrong type
    """
    if not isinstance(data, dict):
        raise ContentValidationError(
            entry_id, ROOT_FIELD, f"expected a mapping, got {type(data).__name__}"
        )

    try:
        return schema.model_validate(data)
    except ValidationError as e:
        errors = [(_field_name(err["loc"]), err["msg"]) for err in e.errors()]
        field, message = errors[0]
        raise ContentValidationError(entry_id, field, message, errors) from e
