"""
binding of raw html form fields onto a validated person

parse_person_form never raises for bad input; callers branch on
FormResult.is_valid and re-render the form with FormResult.errors.
"""
import re
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional

from pydantic import BaseModel, EmailStr, Field, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from app.models import Person

PERSON_FIELDS = ("name", "age", "email")
MAX_AGE = 150
WHOLE_NUMBER = re.compile(r"[+-]?\d+")


class PersonForm(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    age: int = Field(gt=0, le=MAX_AGE)
    email: EmailStr

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, value):
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("age", mode="before")
    @classmethod
    def whole_number_age(cls, value):
        # only digit strings bind, "3.0" or "3e2" are not ages
        if isinstance(value, str):
            value = value.strip()
            if not WHOLE_NUMBER.fullmatch(value):
                raise PydanticCustomError("int_parsing", "Input should be a valid integer")
            return int(value)
        return value

    @field_validator("email", mode="wrap")
    @classmethod
    def plain_email(cls, value, handler):
        raw = value.strip() if isinstance(value, str) else value
        address = handler(raw)
        # "Name <addr>" validates to addr; keep only what the user typed
        if str(address).lower() != str(raw).lower():
            raise ValueError("display names are not allowed")
        return raw

    def to_person(self) -> Person:
        return Person(name=self.name, age=self.age, email=self.email)


@dataclass
class FieldError:
    field: str
    message: str


@dataclass
class FormResult:
    values: Dict[str, str]
    form: Optional[PersonForm] = None
    errors: List[FieldError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return self.form is not None and not self.errors

    def errors_by_field(self) -> Dict[str, List[str]]:
        grouped: Dict[str, List[str]] = {}
        for error in self.errors:
            grouped.setdefault(error.field, []).append(error.message)
        return grouped

    def submitted_person(self, person_id: Optional[int] = None) -> Person:
        """the raw submission as a person for re-display, never persisted"""
        raw_age = self.values.get("age", "")
        try:
            age = int(raw_age)
        except ValueError:
            age = 0
        return Person(
            id=person_id,
            name=self.values.get("name", ""),
            age=age,
            email=self.values.get("email", ""),
        )


def _message_for(error: dict) -> str:
    kind = error.get("type", "")
    if kind == "missing":
        return "is required"
    if kind == "string_too_short":
        return "must not be empty"
    if kind == "string_too_long":
        return "is too long"
    if kind == "int_parsing":
        return "must be a whole number"
    if kind == "greater_than":
        return "must be greater than 0"
    if kind == "less_than_equal":
        return f"must be at most {MAX_AGE}"
    if kind == "value_error":
        return "must be a valid email address"
    return error.get("msg", "is invalid")


def parse_person_form(data: Mapping[str, str]) -> FormResult:
    values = {
        name: (str(data[name]) if data.get(name) is not None else "")
        for name in PERSON_FIELDS
    }
    payload = {name: value for name, value in values.items() if name in data}
    # an empty age field is a missing age, not a parsing failure
    if payload.get("age", None) is not None and not payload["age"].strip():
        payload.pop("age")

    try:
        form = PersonForm(**payload)
    except ValidationError as e:
        errors = [
            FieldError(field=str(err["loc"][0]) if err.get("loc") else "__all__", message=_message_for(err))
            for err in e.errors()
        ]
        return FormResult(values=values, errors=errors)

    return FormResult(values=values, form=form)
