import pytest

from tinyhttpd.argument_parser import ArgumentError, ArgumentParser, CommandLineArgument


def test_one_integer_argument_short_name():
    parser = ArgumentParser()
    parser.add_argument("p", "port")
    parser.parse_arguments(["-p", "2000"])
    assert parser.get_int("p") == 2000
    assert parser.get_int("port") == 2000


def test_one_integer_argument_long_name():
    parser = ArgumentParser()
    parser.add_argument("p", "port")
    parser.parse_arguments(["--port", "3000"])
    assert parser.get_int("p") == 3000
    assert parser.get_int("port") == 3000


def test_one_string_argument_short_name():
    parser = ArgumentParser()
    parser.add_argument("p", "path")
    parser.parse_arguments(["-p", "/usr/bin"])
    assert parser.get_str("p") == "/usr/bin"
    assert parser.get_str("path") == "/usr/bin"


def test_integer_short_and_string_long():
    parser = ArgumentParser()
    parser.add_argument("p", "port")
    parser.add_argument("n", "name")
    parser.parse_arguments(["-p", "4", "--name", "hello"])
    assert parser.get_str("n") == "hello"
    assert parser.get_str("name") == "hello"
    assert parser.get_int("p") == 4
    assert parser.get_int("port") == 4


def test_uneven_amount_of_arguments_raises():
    parser = ArgumentParser()
    parser.add_argument("p", "port")
    with pytest.raises(ArgumentError, match="Uneven amount of arguments"):
        parser.parse_arguments(["-p", "asd", "44444"])


def test_get_integer_with_no_arguments_returns_default_0():
    parser = ArgumentParser()
    parser.add_argument("p", "port")
    parser.parse_arguments([])
    assert parser.get_int("p") == 0


def test_unset_string_is_empty():
    parser = ArgumentParser()
    parser.add_argument("fp", "file-path")
    parser.parse_arguments([])
    assert parser.get_str("fp") == ""


def test_unknown_name_defaults():
    parser = ArgumentParser()
    assert parser.get_int("missing") == 1
    assert parser.get_str("missing") == ""
    assert parser.get_float("missing") == 1.0


def test_unrecognized_flag_raises(capsys):
    parser = ArgumentParser()
    parser.add_argument("p", "port")
    with pytest.raises(ArgumentError, match="Unrecognized flag: -x"):
        parser.parse_arguments(["-x", "1"])
    assert "Unrecognized flag: -x" in capsys.readouterr().out


def test_non_numeric_int_raises():
    parser = ArgumentParser()
    parser.add_argument("p", "port")
    parser.parse_arguments(["-p", "asd"])
    with pytest.raises(ArgumentError):
        parser.get_int("p")


def test_int_uses_leading_digits():
    parser = ArgumentParser()
    parser.add_argument("p", "port")
    parser.parse_arguments(["-p", "2000abc"])
    assert parser.get_int("p") == 2000


def test_int_out_of_range_raises():
    parser = ArgumentParser()
    parser.add_argument("p", "port")
    parser.parse_arguments(["-p", "99999999999"])
    with pytest.raises(ArgumentError):
        parser.get_int("p")


def test_float_value_and_unset():
    parser = ArgumentParser()
    parser.add_argument("r", "ratio")
    parser.add_argument("s", "scale")
    parser.parse_arguments(["--ratio", "2.5"])
    assert parser.get_float("r") == 2.5
    assert parser.get_float("scale") == 0.0


def test_later_value_overrides_earlier():
    parser = ArgumentParser()
    parser.add_argument("p", "port")
    parser.parse_arguments(["-p", "1", "--port", "2000"])
    assert parser.get_int("p") == 2000


@pytest.mark.parametrize(
    "argument, expected",
    [("-p", True), ("--port", True), ("p", False), ("--p", False), ("-port", False), ("-", False), ("--", False)],
)
def test_matches(argument, expected):
    assert CommandLineArgument("p", "port").matches(argument) is expected