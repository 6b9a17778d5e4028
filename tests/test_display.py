from io import StringIO

from rich.console import Console

from keybindings.display import render_keybindings
from keybindings.extraction import KeybindingEntry


def render(entries: list[KeybindingEntry]) -> str:
    buffer = StringIO()
    render_keybindings(entries, console=Console(file=buffer, width=100))
    return buffer.getvalue()


def test_table_rows_aligned() -> None:
    out = render(
        [
            KeybindingEntry("$mod+Return", "exec alacritty"),
            KeybindingEntry("$mod+q", "kill"),
        ]
    )
    lines = out.splitlines()

    assert lines[0] == ""
    assert lines[-1] == ""
    assert lines[1].split() == ["Binding", "Definition"]
    assert lines[2].index("exec alacritty") == lines[3].index("kill")
    assert lines[1].index("Definition") == lines[2].index("exec alacritty")


def test_empty_table_has_header_only() -> None:
    lines = render([]).splitlines()
    assert [line for line in lines if line.strip()] == [lines[1]]
    assert "Binding" in lines[1]


def test_markup_is_not_interpreted() -> None:
    out = render([KeybindingEntry("[bold]x[/bold]", "[red]y")])
    assert "[bold]x[/bold]" in out
    assert "[red]y" in out


def test_styles_applied_on_terminal() -> None:
    buffer = StringIO()
    console = Console(file=buffer, width=100, force_terminal=True, color_system="standard")
    render_keybindings([KeybindingEntry("a", "b")], console=console)
    out = buffer.getvalue()
    assert "\x1b[" in out
    assert "33" in out  # yellow binding column


def test_long_definition_stays_on_one_line() -> None:
    definition = "exec " + " ".join(f"--flag{i}" for i in range(20))
    buffer = StringIO()

    # Console width as seen when output is piped
    render_keybindings(
        [KeybindingEntry("$mod+Return", definition)], console=Console(file=buffer, width=80)
    )

    lines = buffer.getvalue().splitlines()
    assert len(lines) == 4
    assert lines[2].startswith("$mod+Return")
    assert lines[2].rstrip().endswith(definition)
