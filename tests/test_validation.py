from datetime import date

import pytest

from isd.errors import APIError
from isd.records import Gender, TriState
from isd.schemas import CreateAthleteRequest, CreateClubRequest, CreateCoachRequest
from isd.validation import (
    FieldErrors,
    active_or_unknown,
    given_ids,
    is_valid_date,
    merge,
    parse_active,
    parse_date,
    parse_gender,
    parse_request_date,
    require_found,
    require_id,
    validate_create_athlete,
    validate_create_club,
    validate_create_coach,
)


def test_parse_date():
    assert parse_date("2024-02-29") == date(2024, 2, 29)


@pytest.mark.parametrize("value", ["2024-02-30", "2024-2-01", "17-05-2010", "2024-01-01T00:00", "２０２４-01-01", ""])
def test_parse_date_rejects(value):
    with pytest.raises(ValueError):
        parse_date(value)
    assert not is_valid_date(value)


def test_field_errors_message_joins_both_lists():
    errors = FieldErrors()
    errors.require("name", "")
    errors.require("country", "")
    errors.require_date("establish_date", "yesterday")

    assert errors.message() == (
        "Missing required fields: [name,country]"
        " + Wrong Format fields: [establish_date (format: yyyy-mm-dd)]"
    )


def test_field_errors_silent_when_clean():
    errors = FieldErrors()
    errors.require("name", "x")
    errors.require_date("dob", "2000-01-01")
    errors.check_active("")
    errors.raise_if_any()
    assert errors.message() == ""


def test_validate_create_club_lists_every_missing_field():
    with pytest.raises(APIError) as info:
        validate_create_club(CreateClubRequest())

    assert info.value.code == 400
    assert info.value.message == (
        "Missing required fields: [name,country,province,district,email_pic,"
        "establish_date,logo,address,pic,discipline,phone_number]"
    )


def test_validate_create_club_rejects_unknown_active(club_payload):
    club_payload["active"] = "UNKNOWN"
    with pytest.raises(APIError) as info:
        validate_create_club(CreateClubRequest(**club_payload))

    assert info.value.message == "Wrong Format fields: [active (one of: TRUE,FALSE)]"


def test_validate_create_athlete_checks_gender():
    request = CreateAthleteRequest(
        club_id="c1",
        name="Sari",
        dob="2001-03-04",
        phone_number="0812",
        gender="OTHER",
        email="sari@example.com",
        register_date="2024-01-10",
    )
    with pytest.raises(APIError) as info:
        validate_create_athlete(request)

    assert info.value.message == "Wrong Format fields: [gender (one of: MALE,FEMALE)]"


def test_validate_create_coach_gender_optional():
    request = CreateCoachRequest(
        name="Agus",
        dob="sometime in 1980",
        phone_number="0813",
        email="agus@example.com",
        discipline="fencing",
        register_date="2024-01-10",
    )
    validate_create_coach(request)


def test_require_id():
    assert require_id("abc") == "abc"
    with pytest.raises(APIError) as info:
        require_id("")
    assert info.value.message == "no uuid provided"


def test_require_found():
    assert require_found(["first", "second"]) == "first"
    with pytest.raises(APIError) as info:
        require_found([])
    assert info.value.message == "wrong uuid provided"


def test_parse_active():
    assert parse_active("TRUE") is TriState.TRUE
    assert parse_active("FALSE") is TriState.FALSE
    for value in ("UNKNOWN", "true", "yes"):
        with pytest.raises(APIError) as info:
            parse_active(value)
        assert info.value.message == "wrong value for active, should be FALSE or TRUE"


def test_active_or_unknown():
    assert active_or_unknown("") is TriState.UNKNOWN
    assert active_or_unknown("FALSE") is TriState.FALSE


def test_parse_gender():
    assert parse_gender("FEMALE") is Gender.FEMALE
    with pytest.raises(APIError):
        parse_gender("female")


def test_parse_request_date_names_field():
    with pytest.raises(APIError) as info:
        parse_request_date("2024-13-01", "dob")
    assert info.value.code == 400
    assert info.value.message.startswith("dob: ")


def test_merge_skips_empty_values():
    from isd.records import Account

    current = Account(id="a1", name="Old", email="old@example.com", password="pw")
    merged = merge(current, name="New", email="", password=None)

    assert merged.name == "New"
    assert merged.email == "old@example.com"
    assert merged.password == "pw"
    assert current.name == "Old"


def test_given_ids_drops_blanks():
    assert given_ids(["", "a", "", "b"]) == ["a", "b"]
    assert given_ids([""]) == []
