import time

import pytest

from coords.model import Coordinates
from coords.notation import (
    dms_to_decimal,
    hemisphere_sign,
    looks_like_coordinates,
    match_decimal,
    match_dms,
    parse_coordinates,
)


def test_dms_standard():
    c = parse_coordinates("4°39'1.34\"N 101°5'6.43\"E")
    assert c is not None
    assert c.latitude == pytest.approx(4.6504, abs=1e-4)
    assert c.longitude == pytest.approx(101.0851, abs=1e-4)


def test_dms_south_west_negative():
    c = parse_coordinates("10°30'30\"S 45°15'15\"W")
    assert c is not None
    assert c.latitude < 0
    assert c.longitude < 0
    assert c.latitude == pytest.approx(-(10 + 30 / 60 + 30 / 3600))


def test_dms_lowercase_hemispheres():
    upper = parse_coordinates("4°39'1.34\"N 101°5'6.43\"E")
    lower = parse_coordinates("4°39'1.34\"n 101°5'6.43\"e")
    assert lower == upper


def test_dms_minute_and_second_marks_optional():
    marked = parse_coordinates("4°39'1.34\"N 101°5'6.43\"E")
    bare = parse_coordinates("4°39 1.34N 101°5 6.43E")
    assert bare is not None
    assert bare == marked


def test_dms_requires_both_groups_and_degree_sign():
    assert parse_coordinates("4°39'1.34\"N") is None
    assert parse_coordinates("4 39 1.34 N 101 5 6.43 E") is None
    # longitude hemisphere in the latitude slot
    assert parse_coordinates("4°39'1.34\"E 101°5'6.43\"N") is None


def test_dms_out_of_range_fails():
    assert parse_coordinates("95°0'0\"N 10°0'0\"E") is None
    assert parse_coordinates("10°0'0\"N 181°0'0\"W") is None


def test_first_matching_grammar_decides():
    # DMS matches structurally but is out of range; the decimal pair is not consulted
    assert parse_coordinates("10°0'0\"N 200°0'0\"E 3.1, 101.2") is None


@pytest.mark.parametrize("lat_h,lon_h,lat_sign,lon_sign", [
    ("N", "E", 1, 1),
    ("N", "W", 1, -1),
    ("S", "E", -1, 1),
    ("S", "W", -1, -1),
])
@pytest.mark.parametrize("d,m,s", [(0, 0, 12.5), (3, 9, 28.08), (45, 59, 59.99), (89, 0, 0)])
def test_dms_sign_follows_hemisphere(lat_h, lon_h, lat_sign, lon_sign, d, m, s):
    c = parse_coordinates(f"{d}°{m}'{s}\"{lat_h} {d + 90}°{m}'{s}\"{lon_h}")
    assert c is not None
    assert c.latitude * lat_sign >= 0
    assert c.longitude * lon_sign > 0
    assert abs(c.latitude) == pytest.approx(d + m / 60 + s / 3600)


def test_decimal_exact():
    c = parse_coordinates("3.1578, 101.7117")
    assert c == Coordinates(3.1578, 101.7117)
    assert c.latitude == 3.1578
    assert c.longitude == 101.7117


def test_decimal_negative_and_spacing():
    c = parse_coordinates("-33.8688,151.2093")
    assert c is not None
    assert c.latitude == -33.8688
    assert c.longitude == 151.2093
    assert parse_coordinates("  1 ,  2  ") == Coordinates(1.0, 2.0)


def test_decimal_bounds_inclusive():
    assert parse_coordinates("90, 180") == Coordinates(90, 180)
    assert parse_coordinates("-90, -180") == Coordinates(-90, -180)


@pytest.mark.parametrize("raw", ["91, 100", "-91, 100", "0, 181", "0, -181", "90.0001, 0"])
def test_decimal_out_of_range(raw):
    assert parse_coordinates(raw) is None


@pytest.mark.parametrize("raw", ["", "hello world", "Kuala Lumpur", "not coordinates", "3.1578"])
def test_unparseable(raw):
    assert parse_coordinates(raw) is None


def test_matchers_return_raw_pairs():
    assert match_decimal("91, 100") == (91.0, 100.0)
    assert match_dms("no degrees here") is None
    lat, lon = match_dms("1°0'0\"S 2°30'0\"W")
    assert lat == pytest.approx(-1.0)
    assert lon == pytest.approx(-2.5)


def test_hemisphere_sign():
    assert hemisphere_sign("N") == 1
    assert hemisphere_sign("e") == 1
    assert hemisphere_sign("S") == -1
    assert hemisphere_sign("w") == -1
    with pytest.raises(ValueError):
        hemisphere_sign("X")


def test_dms_to_decimal():
    assert dms_to_decimal(10, 30, 0, "N") == pytest.approx(10.5)
    assert dms_to_decimal(10, 30, 36, "S") == pytest.approx(-10.51)
    assert dms_to_decimal(0, 0, 0, "W") == 0


def test_looks_like_degree_sign():
    assert looks_like_coordinates("4°39'1.34\"N") is True
    assert looks_like_coordinates("°") is True
    assert looks_like_coordinates("somewhere 12° north") is True


def test_looks_like_decimal_shape():
    assert looks_like_coordinates("3.1578, 101.7117") is True
    assert looks_like_coordinates("  -3.1578 ,101.7117  ") is True
    # malformed but coordinate-shaped: still a positive hint
    assert looks_like_coordinates("91, 500") is True


@pytest.mark.parametrize("raw", ["hello world", "Kuala Lumpur", "Batu Caves", "", "3.1578", "Route 66, Arizona"])
def test_looks_like_rejects_plain_text(raw):
    assert looks_like_coordinates(raw) is False


@pytest.mark.parametrize("raw", [
    "1" * 5000 + "°0'0\"N 1°0'0\"E",
    "1°" + "2" * 5000 + "'0\"N 1°0'0\"E",
    "1°0'" + "3" * 5000 + "\"N 1°0'0\"E",
])
def test_oversized_dms_fields_do_not_parse(raw):
    assert match_dms(raw) is None
    assert parse_coordinates(raw) is None


def test_oversized_decimal_is_out_of_range():
    assert parse_coordinates("1" * 5000 + ", 1") is None
    assert parse_coordinates("1, " + "9" * 5000) is None


@pytest.mark.parametrize("raw", [
    "1°" + "1" * 20000,
    "1°1'" + "1" * 20000,
    "1" * 20000,
    "1" * 20000 + ", x",
    "°" * 20000,
])
def test_long_digit_runs_fail_fast(raw):
    start = time.perf_counter()
    assert parse_coordinates(raw) is None
    assert time.perf_counter() - start < 1.0


def test_degree_field_is_not_taken_from_a_longer_number():
    # "1090" must not be read as 90 degrees
    assert match_dms("1090°0'0\"N 10°0'0\"E") is None
