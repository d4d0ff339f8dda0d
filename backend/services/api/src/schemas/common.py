from datetime import date, datetime
from typing import Any, Dict, List, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator
from pydantic.alias_generators import to_camel

from backend.shared.errors import RequestValidationFailed

SchemaType = TypeVar("SchemaType", bound=BaseModel)


class CamelModel(BaseModel):
    """Base schema: snake_case in Python, camelCase on the wire."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        use_enum_values=True,
        str_strip_whitespace=True,
    )

    def to_json(self) -> Dict[str, Any]:
        """JSON-ready dict using the wire (camelCase) field names."""
        return self.model_dump(mode="json", by_alias=True)


class PartnerSummary(CamelModel):
    """Owning partner details attached to a catalog record."""
    id: int
    business_name: str
    rating: float
    contact: Optional[Dict[str, Any]] = None
    address: Optional[Dict[str, Any]] = None


class AvailabilityUpdate(CamelModel):
    """Availability sub-record of a vehicle or material."""
    is_available: bool = Field(..., description="Whether the item can be booked")
    available_from: Optional[datetime] = Field(None, description="Start of the bookable window")
    available_until: Optional[datetime] = Field(None, description="End of the bookable window")
    unavailable_dates: List[date] = Field(default_factory=list, description="Blocked dates")

    @model_validator(mode="after")
    def validate_window(self):
        """Validate that the window does not end before it starts."""
        if self.available_from and self.available_until and self.available_until < self.available_from:
            raise ValueError("availableUntil must not be before availableFrom")
        return self


def format_validation_errors(errors: Sequence[Dict[str, Any]], location: Optional[str] = None) -> List[Dict[str, Any]]:
    """
    Flatten pydantic error dicts into ``{field, message, location}`` entries.

    Args:
        errors: Output of ``ValidationError.errors()`` or ``RequestValidationError.errors()``
        location: Location to report when the error locations carry none
    """
    formatted = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if location is None and loc:
            where, path = loc[0], loc[1:]
        else:
            where, path = location, loc
        formatted.append({
            "field": ".".join(path) if path else where,
            "message": error.get("msg", "Invalid value"),
            "location": where,
        })
    return formatted


def validate_payload(schema: Type[SchemaType], payload: Any) -> SchemaType:
    """
    Validate a raw request body against a schema.

    Raises:
        RequestValidationFailed: With one entry per violated field
    """
    try:
        return schema.model_validate(payload)
    except ValidationError as e:
        raise RequestValidationFailed(format_validation_errors(e.errors(), location="body"))
