import pytest

from pomosync.services.timer.schedule import (
    format_time,
    parse_flag,
    parse_minutes,
    pyramid_minutes,
    pyramid_seconds,
)


@pytest.mark.parametrize('cycle', range(0, 12))
def test_pyramid_formula(cycle):
    assert pyramid_minutes(cycle) == min(30, 5 + 5 * cycle)
    assert pyramid_seconds(cycle) == pyramid_minutes(cycle) * 60


def test_pyramid_caps_at_thirty():
    assert pyramid_seconds(0) == 300
    assert pyramid_minutes(5) == pyramid_minutes(6) == 30
    assert pyramid_minutes(100) == 30


@pytest.mark.parametrize('value,expected', [
    (None, 25),
    ('', 25),
    ('abc', 25),
    (0, 25),
    ('0', 25),
    (True, 25),
    (float('nan'), 25),
    (float('inf'), 25),
    ({'minutes': 5}, 25),
    (1, 1),
    (60, 60),
    (61, 60),
    (120, 60),
    (-4, 1),
    (12.9, 12),
    ('15', 15),
    (' 30 ', 30),
    ('45min', 45),
    ('7.5', 7),
    (10 ** 400, 60),
    (-(10 ** 400), 1),
    ('9' * 400, 25),
])
def test_parse_minutes(value, expected):
    assert parse_minutes(value, 25) == expected


def test_parse_flag():
    assert parse_flag(True) is True
    assert parse_flag('ON') is True
    assert parse_flag('1') is True
    assert parse_flag('false') is False
    assert parse_flag(0) is False


@pytest.mark.parametrize('seconds,expected', [
    (0, '00:00'),
    (5, '00:05'),
    (65, '01:05'),
    (1500, '25:00'),
    (3600, '60:00'),
])
def test_format_time(seconds, expected):
    assert format_time(seconds) == expected
