import io

import pytest

from vyprava.console import KEY_PROMPT, Color, Console, load_ascii_art


def make_console(text="", width=40):
    out = io.StringIO()
    return Console(stdin=io.StringIO(text), stdout=out, width=width, delay=False), out


@pytest.mark.parametrize(
    "color, escape",
    [
        (Color.RED, "\033[31m"),
        (Color.GREEN, "\033[32m"),
        (Color.YELLOW, "\033[33m"),
        (Color.BLUE, "\033[34m"),
        (Color.MAGENTA, "\033[35m"),
        (Color.CYAN, "\033[36m"),
        (Color.WHITE, "\033[37m"),
    ],
)
def test_color_ansi_matches_standard_escapes(color, escape):
    assert color.ansi == escape


def test_bright_colors_differ_from_dark_ones():
    for dark in range(8):
        assert Color(dark + 8).ansi != Color(dark).ansi


def test_set_color_writes_escape():
    console, out = make_console()
    console.set_color(4)
    assert out.getvalue() == "\033[31m"


def test_write_goes_to_stdout():
    console, out = make_console()
    console.write("ahoj")
    assert out.getvalue() == "ahoj"


def test_print_centered_pads_evenly():
    console, out = make_console(width=21)
    console.print_centered("VESNICE")
    line = out.getvalue()
    assert line.endswith("VESNICE\n")
    padding = len(line) - len(line.lstrip(" "))
    assert line.strip() == "VESNICE"
    assert 0 <= 21 - len("VESNICE") - 2 * padding <= 1


def test_print_centered_long_text_has_no_padding():
    console, out = make_console(width=4)
    console.print_centered("TVUJ PRIBEH")
    assert out.getvalue() == "TVUJ PRIBEH\n"


def test_draw_header_line_spans_width():
    console, out = make_console(width=12)
    console.draw_header_line()
    text = out.getvalue()
    assert "-" * 12 + "\n" in text
    assert "-" * 13 not in text
    assert text.endswith(Color.WHITE.ansi)


def test_clear_screen_emits_clear_sequence():
    console, out = make_console()
    console.clear_screen()
    assert "\033[2J" in out.getvalue()


def test_read_int_reads_successive_tokens():
    console, _ = make_console("1 2\n3\n")
    assert [console.read_int(), console.read_int(), console.read_int()] == [1, 2, 3]


def test_read_int_rejects_text_and_drops_line():
    console, _ = make_console("abc 4\n5\n")
    with pytest.raises(ValueError):
        console.read_int()
    assert console.read_int() == 5


def test_read_int_writes_prompt():
    console, out = make_console("2\n")
    assert console.read_int("Vyber 1 nebo 2: ") == 2
    assert out.getvalue() == "Vyber 1 nebo 2: "


def test_read_int_at_end_of_input_raises_eof():
    console, _ = make_console("")
    with pytest.raises(EOFError):
        console.read_int()


def test_read_char_takes_first_character():
    console, _ = make_console("  yes\n")
    assert console.read_char() == "y"
    assert console.read_char() == "e"


def test_wait_for_key_press_consumes_a_line():
    console, out = make_console("x\n7\n")
    console.wait_for_key_press()
    assert KEY_PROMPT in out.getvalue()
    assert console.read_int() == 7


def test_load_ascii_art_reads_section(tmp_path):
    art = tmp_path / "ascii.txt"
    art.write_text("=== smrt ===\nA\nB\n=== vesnice ===\nC\n", encoding="utf-8")
    assert load_ascii_art("smrt", art) == ["A", "B"]
    assert load_ascii_art("vesnice", art) == ["C"]


def test_load_ascii_art_missing_section(tmp_path):
    art = tmp_path / "ascii.txt"
    art.write_text("=== smrt ===\nA\n", encoding="utf-8")
    with pytest.raises(KeyError):
        load_ascii_art("blessed", art)


def test_print_ascii_art_writes_lines(tmp_path):
    art = tmp_path / "ascii.txt"
    art.write_text("=== MB1 ===\n(o_o)\n", encoding="utf-8")
    console, out = make_console()
    console.print_ascii_art("MB1", art)
    assert out.getvalue() == "(o_o)\n"


def test_print_ascii_art_reports_missing_file(tmp_path, capsys):
    console, out = make_console()
    missing = tmp_path / "nothing.txt"
    console.print_ascii_art("MB1", missing)
    assert "Nepodarilo se otevrit soubor" in capsys.readouterr().err
    assert out.getvalue() == ""


def test_print_ascii_art_reports_missing_section(tmp_path, capsys):
    art = tmp_path / "ascii.txt"
    art.write_text("=== MB1 ===\nx\n", encoding="utf-8")
    console, _ = make_console()
    console.print_ascii_art("MB2", art)
    assert "nebyl nalezen" in capsys.readouterr().err