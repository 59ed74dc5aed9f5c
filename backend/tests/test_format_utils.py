from rendering.format_utils import format_count, split_address


def test_format_count_drops_trailing_zero():
    assert format_count(2.0) == "2"
    assert format_count(3200) == "3200"
    assert format_count(None) == "0"


def test_format_count_keeps_every_fractional_digit():
    assert format_count(3.5) == "3.5"
    assert format_count(123456.5) == "123456.5"
    assert format_count(1234567.5) == "1234567.5"


def test_split_address():
    assert split_address("8800 Sunset Blvd, Los Angeles, CA") == ("8800 Sunset Blvd", "Los Angeles, CA")
    assert split_address("1 Main St") == ("1 Main St", "")
