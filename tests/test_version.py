from slfmt.version import (
    VERSION_MAJOR,
    VERSION_MINOR,
    VERSION_PATCH,
    version_number,
    version_string,
)


def test_version_string():
    assert version_string() == "0.1.0"


def test_version_string_matches_parts():
    parts = [int(part) for part in version_string().split(".")]
    assert parts == [VERSION_MAJOR, VERSION_MINOR, VERSION_PATCH]


def test_version_number_encodes_parts():
    number = version_number()
    assert number // 10000 == VERSION_MAJOR
    assert (number // 100) % 100 == VERSION_MINOR
    assert number % 100 == VERSION_PATCH