from datetime import date, datetime, timezone

from isd.records import Athlete, Gender, OrganizerWithClub, Token, TriState


def test_organizer_from_joined_row():
    row = {
        "id": "o1",
        "name": "Rina",
        "position": "Secretary",
        "register_date": "2024-01-10",
        "phone_number": "0812",
        "active": "UNKNOWN",
        "email": "",
        "club_id": "c1",
        "club_name": "Jakarta Fencing Club",
        "club_country": "Indonesia",
        "club_province": "DKI Jakarta",
        "club_district": "Jakarta Selatan",
        "club_establish_date": date(2010, 5, 17),
        "club_logo": "logo.png",
        "club_address": "Jl. Sudirman 1",
        "club_email_pic": "budi@example.com",
        "club_pic": "Budi",
        "club_discipline": "fencing",
        "club_phone_number": "0211",
        "club_active": "TRUE",
    }

    organizer = OrganizerWithClub.from_row(row)

    assert organizer.club_id == "c1"
    assert organizer.club.id == "c1"
    assert organizer.club.name == "Jakarta Fencing Club"
    assert organizer.club.active is TriState.TRUE
    assert organizer.register_date == date(2024, 1, 10)

    base = organizer.base()
    assert not hasattr(base, "club")
    assert base.club_id == "c1"


def test_to_params_uses_enum_values():
    athlete = Athlete(
        id="a1",
        club_id="c1",
        name="Sari",
        dob=date(2001, 3, 4),
        phone_number="0812",
        gender=Gender.FEMALE,
        email="sari@example.com",
        register_date=date(2024, 1, 10),
        active=TriState.FALSE,
    )

    params = athlete.to_params()

    assert params["gender"] == "FEMALE"
    assert params["active"] == "FALSE"
    assert params["dob"] == date(2001, 3, 4)


def test_token_naive_expiry_is_utc():
    token = Token.from_row({
        "account_id": "a1",
        "token": "abc",
        "expired": "2024-01-02 12:00:00.000000",
    })

    assert token.expired == datetime(2024, 1, 2, 12, 0, tzinfo=timezone.utc)
