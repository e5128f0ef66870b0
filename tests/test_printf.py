import pytest

from pipex.printf import FormatError, eprint, format_message, is_conversion


@pytest.mark.parametrize("char", list("cspdiuxX%"))
def test_is_conversion_accepts_known(char):
    assert is_conversion(char) is True


@pytest.mark.parametrize("char", ["a", "z", "f", "", "cs", " "])
def test_is_conversion_rejects_others(char):
    assert is_conversion(char) is False


def test_plain_text_passes_through():
    assert format_message("hello world\n") == "hello world\n"


def test_percent_literal():
    assert format_message("100%%") == "100%"


def test_string_and_null_string():
    assert format_message("'%s': x", "ls") == "'ls': x"
    assert format_message("%s", None) == "(null)"


def test_null_pointers():
    assert format_message(" %p %p ", 0, 0) == " (nil) (nil) "
    assert format_message("%p", None) == "(nil)"


def test_pointer_round_trip():
    value = 0xDEADBEEF1234
    out = format_message("%p", value)
    assert out.startswith("0x")
    assert int(out[2:], 16) == value


def test_char_from_str_and_int():
    assert format_message("%c%c", "A", ord("B")) == "AB"


@pytest.mark.parametrize("n", [0, 7, -7, 8998, 2**31 - 1, -(2**31)])
def test_decimal_round_trip(n):
    assert int(format_message("%d", n)) == n
    assert format_message("%i", n) == format_message("%d", n)


def test_decimal_wraps_to_int32():
    assert int(format_message("%d", 2**31)) == -(2**31)


def test_unsigned_of_minus_one():
    assert format_message("%u", -1) == "4294967295"


@pytest.mark.parametrize("n", [0, 15, 16, 255, 28917894])
def test_hex_round_trip(n):
    lower = format_message("%x", n)
    upper = format_message("%X", n)
    assert int(lower, 16) == n
    assert lower == lower.lower()
    assert upper == lower.upper()


def test_hex_of_minus_one():
    assert format_message("%x", -1) == "ffffffff"


def test_invalid_conversion_raises_with_partial():
    with pytest.raises(FormatError) as info:
        format_message("abc%q", 1)
    assert info.value.partial == "abc"


def test_trailing_percent_raises():
    with pytest.raises(FormatError):
        format_message("abc%")


def test_missing_argument_raises():
    with pytest.raises(FormatError):
        format_message("%s and %s", "one")


def test_eprint_writes_to_stderr(capsys):
    count = eprint("%s command not found\n", "nosuchcmd")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "nosuchcmd command not found\n"
    assert count == len(captured.err)


def test_eprint_writes_partial_then_raises(capsys):
    with pytest.raises(FormatError):
        eprint("start %s %z", "x")
    assert capsys.readouterr().err == "start x "