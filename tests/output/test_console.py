"""Tests for Rich Console factory and theme."""

from io import StringIO

from wirectl.output.console import WIRE_THEME, create_console, get_output, style_for_direction


class TestCreateConsole:
    def test_returns_console_with_stringio(self) -> None:
        console = create_console()
        assert isinstance(console.file, StringIO)

    def test_no_color_disables_ansi(self) -> None:
        console = create_console(no_color=True)
        console.print("[bold red]hello[/bold red]")
        output = get_output(console)
        assert "\x1b" not in output
        assert "hello" in output

    def test_custom_width(self) -> None:
        assert create_console(width=80).width == 80

    def test_default_width(self) -> None:
        assert create_console().width == 120

    def test_theme_styles_resolve(self) -> None:
        console = create_console()
        for name in WIRE_THEME.styles:
            console.get_style(name)


class TestStyleForDirection:
    def test_known_directions(self) -> None:
        assert style_for_direction("in") == "wire.dir.in"
        assert style_for_direction("out") == "wire.dir.out"
        assert style_for_direction("none") == "wire.dir.none"

    def test_unknown_direction(self) -> None:
        assert style_for_direction("sideways") == ""
