import io

import pytest

from engine_tools.console import (
    Capabilities,
    Console,
    LogLevel,
    colors,
    detect_capabilities,
    log_error,
    log_info,
    log_success,
    log_warning,
)


def test_levels_route_to_the_right_stream(capsys, plain_caps):
    console = Console(name="x", capabilities=plain_caps)

    console.info("to-out-info")
    console.success("to-out-success")
    console.warning("to-err-warning")
    console.error("to-err-error")

    captured = capsys.readouterr()
    assert "to-out-info" in captured.out
    assert "to-out-success" in captured.out
    assert "to-err" not in captured.out
    assert "to-err-warning" in captured.err
    assert "to-err-error" in captured.err
    assert "to-out" not in captured.err


def test_each_level_has_its_own_glyph(capsys, plain_caps):
    console = Console(name="x", capabilities=plain_caps)

    console.info("m")
    console.success("m")
    console.warning("m")
    console.error("m")

    captured = capsys.readouterr()
    out_lines = captured.out.splitlines()
    err_lines = captured.err.splitlines()
    assert out_lines[0].endswith(f"[x] {LogLevel.INFO.glyph} m")
    assert out_lines[1].endswith(f"[x] {LogLevel.SUCCESS.glyph} m")
    assert err_lines[0].endswith(f"[x] {LogLevel.WARNING.glyph} m")
    assert err_lines[1].endswith(f"[x] {LogLevel.ERROR.glyph} m")
    assert len({level.glyph for level in LogLevel}) == 4


def test_no_color_output_is_plain_text(capsys):
    caps = detect_capabilities(
        environ={"NO_COLOR": "1", "FORCE_COLOR": "1"},
        argv=[],
        stdout=io.StringIO(),
        platform="linux",
    )
    Console(name="x", capabilities=caps).info("hello")

    out = capsys.readouterr().out
    assert "\x1b" not in out
    assert "[x]" in out
    assert out.rstrip("\n").endswith("hello")


def test_colored_output_colors_glyph(color_caps):
    stdout = io.StringIO()
    Console(name="x", capabilities=color_caps, stdout=stdout).success("done")
    assert colors.green(LogLevel.SUCCESS.glyph) in stdout.getvalue()


def test_multiline_message_is_one_write_with_prefixed_lines(plain_caps):
    stderr = io.StringIO()
    Console(name="build", capabilities=plain_caps, stderr=stderr).error("line one\nline two")

    lines = stderr.getvalue().rstrip("\n").split("\n")
    assert len(lines) == 2
    assert all(" [build] " in line for line in lines)


def test_default_name_and_color(plain_caps):
    console = Console(capabilities=plain_caps)
    assert console.name == "script"
    assert console.color is colors.brand
    assert "[script]" in console.format("x")


def test_name_and_color_are_read_only(plain_caps):
    console = Console(name="x", capabilities=plain_caps)
    with pytest.raises(AttributeError):
        console.name = "y"
    with pytest.raises(AttributeError):
        console.color = colors.red


def test_write_failures_propagate(plain_caps):
    stdout = io.StringIO()
    stdout.close()
    console = Console(capabilities=plain_caps, stdout=stdout)
    with pytest.raises(ValueError):
        console.info("lost")


def test_windows_console_is_prepared_when_coloring(monkeypatch):
    calls = []
    monkeypatch.setattr(colors, "_windows_console_fixed", False)
    monkeypatch.setattr(colors, "just_fix_windows_console", lambda: calls.append(True))

    Console(capabilities=Capabilities(is_windows=True))
    Console(capabilities=Capabilities(is_windows=True))
    Console(capabilities=Capabilities(is_windows=True, color_disabled=True))

    assert calls == [True]


def test_module_level_helpers_use_the_script_console(capsys):
    log_info("i")
    log_success("s")
    log_warning("w")
    log_error("e")

    captured = capsys.readouterr()
    assert captured.out.count("[script]") == 2
    assert captured.err.count("[script]") == 2
