import pytest
from arnie_quotes import DEFAULT_CONCURRENCY, default_concurrency, parse_concurrency


@pytest.mark.parametrize('value, expected', [
    (1, 1),
    (25, 25),
    ('4', 4),
    (' 16 ', 16),
    (None, 10),
    (0, 10),
    (-5, 10),
    ('0', 10),
    ('-2', 10),
    ('', 10),
    ('ten', 10),
    ('3.5', 10),
    (3.0, 10),
    (True, 10),
    ([4], 10),
])
def test_parse_concurrency(value, expected: int) -> None:
    assert parse_concurrency(value) == expected


def test_parse_concurrency__custom_default() -> None:
    assert parse_concurrency(None, default=3) == 3
    assert parse_concurrency(7, default=3) == 7


def test_default_concurrency__unset(monkeypatch) -> None:
    monkeypatch.delenv('MAX_CONCURRENCY', raising=False)
    assert DEFAULT_CONCURRENCY == 10
    assert default_concurrency() == 10


def test_default_concurrency__env(monkeypatch) -> None:
    monkeypatch.setenv('MAX_CONCURRENCY', '42')
    assert default_concurrency() == 42
    monkeypatch.setenv('MAX_CONCURRENCY', 'lots')
    assert default_concurrency() == 10


def test_default_concurrency__mapping() -> None:
    assert default_concurrency({'MAX_CONCURRENCY': '2'}) == 2
    assert default_concurrency({}) == 10
