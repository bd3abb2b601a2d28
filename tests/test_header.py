import pytest

from wooma_import.extraction.header import parse_property_header, split_uk_address


@pytest.mark.parametrize(
    "line, expected",
    [
        ("2 Riverhead Gardens, Driffield, YO25 6AA", ("2 Riverhead Gardens", "Driffield", "YO25 6AA")),
        ("Some House", ("Some House", None, None)),
        ("Flat 3, 10 High Street, York, yo1 7hh", ("Flat 3, 10 High Street", "York", "YO1 7HH")),
        ("10 High Street, York", ("10 High Street", "York", None)),
        ("Flat 1, YO25 6AA", ("Flat 1", None, "YO25 6AA")),
        (None, (None, None, None)),
    ],
)
def test_split_uk_address(line, expected):
    assert split_uk_address(line) == expected


def test_header_from_sample(report_text):
    header = parse_property_header(report_text)
    assert header.address == "2 Riverhead Gardens"
    assert header.city == "Driffield"
    assert header.postcode == "YO25 6AA"
    assert header.appointment_date == "15 January 2026"
    assert header.assessor == "Jane Smith"


def test_missing_header_fields_are_none():
    header = parse_property_header("Report Summary\nHall Good Good")
    assert header.model_dump() == {
        "address": None,
        "city": None,
        "postcode": None,
        "appointment_date": None,
        "assessor": None,
    }


def test_appointment_date_requires_full_date():
    header = parse_property_header("Appointment Date\nTBC")
    assert header.appointment_date is None
