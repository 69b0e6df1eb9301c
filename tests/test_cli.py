import pytest

from tilekit.status.cli import UNKNOWN_STR, Component, main, parse_args, render_status


def test_render_joins_formatted_components():
    components = [
        Component(lambda a: "left", "[%s]"),
        Component(lambda a: "right", "(%s)"),
    ]
    assert render_status(components) == "[left](right)"


def test_render_passes_argument():
    components = [Component(lambda a: a.upper(), "%s", "bat0")]
    assert render_status(components) == "BAT0"


def test_render_uses_unknown_for_missing_value():
    components = [Component(lambda a: None, "%s")]
    assert render_status(components, unknown=UNKNOWN_STR) == "n/a"


def test_render_keeps_empty_value():
    components = [Component(lambda a: "", "<%s>")]
    assert render_status(components) == "<>"


def test_render_percent_escape():
    components = [Component(lambda a: "42", "%s%%")]
    assert render_status(components) == "42%"


def test_render_stops_at_piece_that_does_not_fit():
    components = [Component(lambda a: "aaa", "%s"), Component(lambda a: "bbb", "%s")]
    assert render_status(components, maxlen=6) == "aaa"
    assert render_status(components, maxlen=7) == "aaabbb"


def test_render_result_shorter_than_maxlen():
    components = [Component(lambda a: "x" * 50, "%s") for _ in range(10)]
    result = render_status(components, maxlen=128)
    assert len(result) < 128
    assert set(result) == {"x"}


def test_parse_no_flags():
    flags = parse_args([])
    assert (flags.single_line, flags.once) == (False, False)


def test_parse_single_line():
    flags = parse_args(["-s"])
    assert (flags.single_line, flags.once) == (True, False)


@pytest.mark.parametrize("argv", [["-1"], ["-s1"], ["-s", "-1"]])
def test_parse_once_implies_single_line(argv):
    flags = parse_args(argv)
    assert (flags.single_line, flags.once) == (True, True)


def test_parse_double_dash_ends_flags():
    flags = parse_args(["--"])
    assert flags.single_line is False


def test_parse_version():
    with pytest.raises(SystemExit) as exc:
        parse_args(["-v"])
    assert exc.value.code == "slstatus-1.0"


@pytest.mark.parametrize("argv", [["-x"], ["extra"], ["-"], ["--", "-s"], ["-sx"]])
def test_parse_usage_errors(argv):
    with pytest.raises(SystemExit) as exc:
        parse_args(argv)
    assert str(exc.value.code).startswith("usage:")


def test_main_once_prints_single_line(capsys):
    assert main(["-1"]) == 0
    out = capsys.readouterr().out
    lines = out.splitlines()
    assert len(lines) == 1
    assert " CPU:" in lines[0]
    assert " RAM:" in lines[0]


def test_main_rejects_bad_flag():
    with pytest.raises(SystemExit):
        main(["-q"])