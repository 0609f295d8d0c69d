from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from pydantic.alias_generators import to_camel
from email_validator import validate_email, EmailNotValidError
from typing import Optional, List, Dict
from datetime import datetime
import re

BRANCH_CHOICES = (
    "CSE", "ECE", "ME", "CE", "EE", "IT", "PCE",
    "PE", "AE", "EIC", "CHE", "P&I", "Other",
)

YEAR_CHOICES = (
    ("1", "1st"),
    ("2", "2nd"),
    ("3", "3rd"),
    ("4", "4th"),
)

PHONE_PATTERN = re.compile(r"^[0-9+\-\s]+$")

class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

class StudentRegistration(CamelModel):
    """Registration payload submitted by the form or the JSON API"""
    name: str
    email: str
    branch: str
    year: str
    phone_number: str
    university_roll_no: str
    roll_number: str
    cgpa: str
    event_name: Optional[str] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        if len(v) < 2:
            raise ValueError("Name must be at least 2 characters")
        return v

    @field_validator("email")
    @classmethod
    def validate_email_address(cls, v):
        try:
            validate_email(v, check_deliverability=False)
        except EmailNotValidError:
            raise ValueError("Please enter a valid email address")
        return v.lower()

    @field_validator("branch")
    @classmethod
    def validate_branch(cls, v):
        if v not in BRANCH_CHOICES:
            raise ValueError("Please select a valid branch")
        return v

    @field_validator("year")
    @classmethod
    def validate_year(cls, v):
        if v not in dict(YEAR_CHOICES):
            raise ValueError("Year is required")
        return v

    @field_validator("phone_number")
    @classmethod
    def validate_phone_number(cls, v):
        digits = sum(ch.isdigit() for ch in v)
        if digits < 10 or not PHONE_PATTERN.match(v):
            raise ValueError("Phone number must be at least 10 digits")
        return v

    @field_validator("university_roll_no")
    @classmethod
    def validate_university_roll_no(cls, v):
        if len(v) < 2:
            raise ValueError("University roll number must be at least 2 characters")
        return v

    @field_validator("roll_number")
    @classmethod
    def validate_roll_number(cls, v):
        if len(v) < 3:
            raise ValueError("Roll number must be at least 3 characters")
        return v

    @field_validator("cgpa")
    @classmethod
    def validate_cgpa(cls, v):
        if not v:
            raise ValueError("CGPA is required")
        return v

    @field_validator("event_name")
    @classmethod
    def blank_event_is_none(cls, v):
        return v or None

def field_errors(exc: ValidationError) -> Dict[str, str]:
    """Map a validation error to the first message per form field"""
    errors = {}
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else "form"
        message = error["msg"]
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        errors.setdefault(field, message)
    return errors

class RegistrationResult(CamelModel):
    success: bool
    user_id: Optional[str] = None
    error: Optional[str] = None

class AttendanceEntryResponse(CamelModel):
    date: datetime
    present: bool

    model_config = ConfigDict(from_attributes=True)

class StudentResponse(CamelModel):
    id: str
    name: str
    email: str
    roll_number: str
    university_roll_no: str
    branch: str
    year: str
    phone_number: str
    cgpa: str
    event_name: List[str] = []
    qr_code: str
    back: Optional[str] = None
    summary: Optional[str] = None
    clubs: Optional[str] = None
    aim: Optional[str] = None
    believe: Optional[str] = None
    expect: Optional[str] = None
    domain: Optional[List[str]] = None
    attendance: List[AttendanceEntryResponse] = []
    review: Optional[float] = None
    comment: str = ""
    round_one_attendance: bool = False
    round_two_attendance: bool = False
    round_one_qualified: bool = False
    round_two_qualified: bool = False
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
