import pytest

from errkit.getnum import NumberError, NumFlag, get_int, get_long, parse_number

SAMPLES = [0, 1, 7, 8, 42, 255, 4096, 123456789]


@pytest.mark.parametrize("n", SAMPLES + [-n for n in SAMPLES])
def test_decimal_round_trip(n):
    assert get_long(str(n)) == n


@pytest.mark.parametrize("n", SAMPLES)
def test_hex_round_trip(n):
    assert get_long(format(n, "x"), NumFlag.BASE_16) == n
    assert get_long(format(n, "#x"), NumFlag.BASE_16) == n


@pytest.mark.parametrize("n", SAMPLES)
def test_octal_round_trip(n):
    assert get_long(format(n, "o"), NumFlag.BASE_8) == n


@pytest.mark.parametrize("n", SAMPLES)
def test_any_base_prefixes(n):
    assert get_long(format(n, "#x"), NumFlag.ANY_BASE) == n
    assert get_long("0" + format(n, "o"), NumFlag.ANY_BASE) == n
    assert get_long(str(n), NumFlag.ANY_BASE) == n


def test_leading_whitespace_and_sign_accepted():
    assert get_long("  +12") == 12
    assert get_long("\t-12") == -12


@pytest.mark.parametrize("text", ["12 ", "abc", "12x", "-", "0x", "19", "8"])
def test_nonnumeric_characters(text):
    flags = NumFlag.BASE_8 if text in ("19", "8") else 0
    with pytest.raises(NumberError) as info:
        get_long(text, flags)
    assert info.value.message == "nonnumeric characters"


@pytest.mark.parametrize("text", ["", None])
def test_empty(text):
    with pytest.raises(NumberError) as info:
        get_long(text)
    assert info.value.message == "null or empty string"
    assert str(info.value) == "getLong error: null or empty string"


def test_long_limits():
    assert get_long("9223372036854775807") == 2**63 - 1
    assert get_long("-9223372036854775808") == -(2**63)
    with pytest.raises(NumberError) as info:
        get_long("9223372036854775808")
    assert info.value.message == "strtol() failed"


def test_nonneg_flag():
    assert get_long("0", NumFlag.NONNEG) == 0
    with pytest.raises(NumberError) as info:
        get_long("-1", NumFlag.NONNEG)
    assert info.value.message == "negative value not allowed"


def test_gt_0_flag():
    assert get_long("1", NumFlag.GT_0) == 1
    with pytest.raises(NumberError) as info:
        get_long("0", NumFlag.GT_0)
    assert info.value.message == "value must be > 0"


def test_get_int_range():
    assert get_int("2147483647") == 2**31 - 1
    assert get_int("-2147483648") == -(2**31)
    with pytest.raises(NumberError) as info:
        get_int("2147483648", 0, "count")
    assert info.value.func_name == "getInt"
    assert info.value.message == "integer out of range"


def test_error_text_with_name_and_arg():
    with pytest.raises(NumberError) as info:
        get_long("12x", 0, "count")
    assert str(info.value) == (
        "getLong error (in count): nonnumeric characters\n"
        "        offending text: 12x"
    )
    assert isinstance(info.value, ValueError)


def test_parse_number_uses_given_function_name():
    with pytest.raises(NumberError) as info:
        parse_number("custom", "x", 0, None)
    assert info.value.func_name == "custom"
    assert parse_number("custom", "33", 0, None) == 33