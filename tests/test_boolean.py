import pytest

from entiqon.boolean import parse_from


def test_none_raises():
    with pytest.raises(ValueError):
        parse_from(None)


@pytest.mark.parametrize("value", [True, False])
def test_bool(value):
    assert parse_from(value) is value


@pytest.mark.parametrize(
    "value, want",
    [(0, False), (0.0, False), (-0.0, False), (1.5, True), (-2.3, True), (3.14159, True), (-123.456, True)],
)
def test_float(value, want):
    assert parse_from(value) is want


@pytest.mark.parametrize(
    "value, want",
    [
        (0, False),
        (1, True),
        (-1, True),
        (42, True),
        (-128, True),
        (127, True),
        (-32768, True),
        (32767, True),
        (-2147483648, True),
        (2147483647, True),
        (-9223372036854775808, True),
        (9223372036854775807, True),
        (12345, True),
        (255, True),
        (65535, True),
        (4294967295, True),
        (18446744073709551615, True),
    ],
)
def test_integer(value, want):
    assert parse_from(value) is want


@pytest.mark.parametrize(
    "text, want",
    [
        ("1", True),
        ("t", True),
        ("true", True),
        ("on", True),
        ("y", True),
        ("yes", True),
        ("0", False),
        ("f", False),
        ("false", False),
        ("off", False),
        ("n", False),
        ("no", False),
    ],
)
def test_valid_strings(text, want):
    assert parse_from(text) is want


@pytest.mark.parametrize("text, want", [("  YES ", True), ("OFF", False), ("True", True)])
def test_strings_are_trimmed_and_case_insensitive(text, want):
    assert parse_from(text) is want


@pytest.mark.parametrize("text", ["enable", "disable", "ok", "", "  ", "sure", "nah"])
def test_rejects_unknown_words(text):
    with pytest.raises(ValueError, match="invalid boolean string"):
        parse_from(text)


@pytest.mark.parametrize(
    "value",
    [object(), [1, 2, 3], {"x": True}, complex(1, 0), iter([1]), lambda: None],
)
def test_unsupported_types(value):
    with pytest.raises(TypeError):
        parse_from(value)