"""
Request validation rules

Create requests are checked in one pass: every missing field and every
malformed field is collected before a single bad-request error is raised.
Update requests only check the identifier and the individually supplied
values.
"""

import re
from datetime import date, datetime
from typing import Optional

from isd.errors import bad_request
from isd.records import Gender, TriState

DATE_FORMAT = "%Y-%m-%d"
DATE_HINT = "format: yyyy-mm-dd"
DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def parse_date(value: str) -> date:
    """
    Parse a yyyy-mm-dd string into a calendar date

    Raises:
        ValueError: wrong layout or impossible calendar date (e.g. 2024-02-30)
    """
    if not DATE_PATTERN.fullmatch(value):
        raise ValueError(f"parsing time \"{value}\" as \"yyyy-mm-dd\": cannot parse")
    return datetime.strptime(value, DATE_FORMAT).date()


def is_valid_date(value: str) -> bool:
    try:
        parse_date(value)
    except ValueError:
        return False
    return True


class FieldErrors:
    """Accumulates missing and wrongly formatted fields for one request"""

    def __init__(self):
        self.missing: list[str] = []
        self.wrong_format: list[str] = []

    def require(self, name: str, value: str):
        if value == "":
            self.missing.append(name)

    def require_date(self, name: str, value: str):
        """Required date: empty is missing, unparseable is a format error"""
        if value == "":
            self.missing.append(name)
        elif not is_valid_date(value):
            self.wrong_format.append(f"{name} ({DATE_HINT})")

    def check_active(self, value: str):
        if value != "" and value not in (TriState.TRUE.value, TriState.FALSE.value):
            self.wrong_format.append(f"active (one of: {TriState.TRUE.value},{TriState.FALSE.value})")

    def check_gender(self, name: str, value: str, required: bool = True):
        if value == "":
            if required:
                self.missing.append(name)
        elif value not in (Gender.MALE.value, Gender.FEMALE.value):
            self.wrong_format.append(f"{name} (one of: {Gender.MALE.value},{Gender.FEMALE.value})")

    def message(self) -> str:
        parts = []
        if self.missing:
            parts.append(f"Missing required fields: [{','.join(self.missing)}]")
        if self.wrong_format:
            parts.append(f"Wrong Format fields: [{','.join(self.wrong_format)}]")
        return " + ".join(parts)

    def raise_if_any(self):
        if self.missing or self.wrong_format:
            raise bad_request(self.message())


# === CREATE RULES ===

def validate_create_club(req) -> None:
    errors = FieldErrors()
    errors.require("name", req.name)
    errors.require("country", req.country)
    errors.require("province", req.province)
    errors.require("district", req.district)
    errors.require("email_pic", req.email_pic)
    errors.require_date("establish_date", req.establish_date)
    errors.require("logo", req.logo)
    errors.require("address", req.address)
    errors.require("pic", req.pic)
    errors.require("discipline", req.discipline)
    errors.require("phone_number", req.phone_number)
    errors.check_active(req.active)
    errors.raise_if_any()


def validate_create_organizer(req) -> None:
    errors = FieldErrors()
    errors.require("name", req.name)
    errors.require("position", req.position)
    errors.require("club_id", req.club_id)
    errors.require_date("register_date", req.register_date)
    errors.require("phone_number", req.phone_number)
    errors.check_active(req.active)
    errors.raise_if_any()


def validate_create_athlete(req) -> None:
    errors = FieldErrors()
    errors.require("club_id", req.club_id)
    errors.require("name", req.name)
    errors.require_date("dob", req.dob)
    errors.require("phone_number", req.phone_number)
    errors.check_gender("gender", req.gender)
    errors.require("email", req.email)
    errors.require_date("register_date", req.register_date)
    errors.check_active(req.active)
    errors.raise_if_any()


def validate_create_coach(req) -> None:
    errors = FieldErrors()
    errors.require("name", req.name)
    errors.require("dob", req.dob)
    errors.require("phone_number", req.phone_number)
    errors.check_gender("gender", req.gender, required=False)
    errors.require("email", req.email)
    errors.require("discipline", req.discipline)
    errors.require_date("register_date", req.register_date)
    errors.check_active(req.active)
    errors.raise_if_any()


def validate_create_account(req) -> None:
    errors = FieldErrors()
    errors.require("name", req.name)
    errors.require("email", req.email)
    errors.require("password", req.password)
    errors.raise_if_any()


# === UPDATE HELPERS ===

def require_id(value: str) -> str:
    if value == "":
        raise bad_request("no uuid provided")
    return value


def parse_active(value: str) -> TriState:
    """Map a request value onto the tri-state; only TRUE/FALSE are accepted"""
    if value == TriState.TRUE.value:
        return TriState.TRUE
    if value == TriState.FALSE.value:
        return TriState.FALSE
    raise bad_request(
        f"wrong value for active, should be {TriState.FALSE.value} or {TriState.TRUE.value}"
    )


def active_or_unknown(value: str) -> TriState:
    """Create-time mapping: an empty value is UNKNOWN"""
    if value == "":
        return TriState.UNKNOWN
    return parse_active(value)


def parse_gender(value: str) -> Gender:
    try:
        return Gender(value)
    except ValueError:
        raise bad_request(
            f"wrong value for gender, should be {Gender.MALE.value} or {Gender.FEMALE.value}"
        )


def parse_request_date(value: str, name: Optional[str] = None) -> date:
    """parse_date for an individually supplied update value"""
    try:
        return parse_date(value)
    except ValueError as e:
        raise bad_request(f"{name}: {e}" if name else str(e))


def merge(current, **changes):
    """Overlay the non-empty request values onto a stored record"""
    supplied = {key: value for key, value in changes.items() if value not in ("", None)}
    return current.model_copy(update=supplied)


def require_found(records: list):
    """First record of a pre-check lookup; no rows means the id was wrong"""
    if not records:
        raise bad_request("wrong uuid provided")
    return records[0]


def given_ids(values: list) -> list:
    """Query ids with blanks dropped; an empty `?id=` means no filter"""
    return [value for value in values if value]
