import io

from medialog.entries import MediaEntry, load_entries, write_entries
from medialog.interactive import (
    Console,
    delete_entry,
    edit_entry,
    read_entries,
    save_entry,
)


def make_console(text):
    out = io.StringIO()
    err = io.StringIO()
    return Console(io.StringIO(text), out, err), out, err


def sample_entries():
    return [
        MediaEntry("Alpha", "Movie", "Ann", "120", "Drama", "good", "http://a.example.com"),
        MediaEntry("Beta", "Book", "Bob", "300", "drama comedy", "fine", "www.b.example.com"),
        MediaEntry("Gamma", "Show", "Cat", "45", "Horror", "scary", "https://c.example.com"),
    ]


def test_ask_strips_newline_and_returns_none_at_end():
    console, out, _ = make_console("hello\n")
    assert console.ask("Q: ") == "hello"
    assert console.ask("Q: ") is None
    assert out.getvalue() == "Q: Q: "


def test_ask_valid_reprompts_until_valid():
    console, out, _ = make_console("   \nabc\n")
    result = console.ask_valid("Name: ", lambda t: bool(t and t.strip()))
    assert result == "abc"
    assert out.getvalue().count("Invalid input, please try again.") == 1


def test_ask_valid_returns_empty_at_end_of_input():
    console, _, _ = make_console("")
    assert console.ask_valid("Name: ", lambda t: False) == ""


def test_ask_int_skips_blank_lines():
    console, _, _ = make_console("  \n\n 42\n")
    assert console.ask_int("N: ") == 42


def test_ask_int_rejects_non_number():
    console, _, _ = make_console("abc\n")
    assert console.ask_int("N: ") is None


def test_ask_int_at_end_of_input():
    console, _, _ = make_console("")
    assert console.ask_int("N: ") is None


def test_save_entry_appends_to_file(tmp_path):
    path = tmp_path / "media.csv"
    answers = "Dune\nPodcast\nbook\nHerbert\n412\nSci-Fi\nClassic\nftp://x\nhttps://dune.example.com\n"
    console, out, _ = make_console(answers)
    entry = save_entry(path, console)
    expected = MediaEntry("Dune", "book", "Herbert", "412", "Sci-Fi", "Classic", "https://dune.example.com")
    assert entry == expected
    assert load_entries(path) == [expected]
    assert out.getvalue().count("Invalid input, please try again.") == 2
    assert "Entry saved successfully!" in out.getvalue()


def test_save_entry_reports_unopenable_file(tmp_path):
    console, out, err = make_console("")
    assert save_entry(tmp_path, console) is None
    assert err.getvalue().startswith("Failed to open file")
    assert out.getvalue() == ""


def test_edit_entry_updates_chosen_fields(tmp_path):
    path = tmp_path / "media.csv"
    write_entries(path, sample_entries())
    console, out, _ = make_console("2\n\nalbum\n\n\n\n\nftp://bad\n")
    edited = edit_entry(path, console)
    stored = load_entries(path)
    original = sample_entries()
    assert stored[0] == original[0]
    assert stored[2] == original[2]
    assert stored[1].type == "album"
    assert stored[1].title == original[1].title
    assert stored[1].link == original[1].link
    assert edited == stored[1]
    assert "Entry updated successfully!" in out.getvalue()


def test_edit_entry_lists_entries(tmp_path):
    path = tmp_path / "media.csv"
    write_entries(path, sample_entries())
    console, out, _ = make_console("0\n")
    assert edit_entry(path, console) is None
    assert "1. Alpha [Movie] by Ann" in out.getvalue()
    assert "Editing cancelled." in out.getvalue()
    assert load_entries(path) == sample_entries()


def test_edit_entry_with_empty_file(tmp_path):
    path = tmp_path / "media.csv"
    path.write_text("", encoding="utf-8")
    console, out, _ = make_console("")
    assert edit_entry(path, console) is None
    assert "No entries found to edit." in out.getvalue()


def test_edit_entry_missing_file(tmp_path):
    console, _, err = make_console("")
    assert edit_entry(tmp_path / "missing.csv", console) is None
    assert err.getvalue().startswith("Failed to open file for reading")


def test_delete_entry_confirmed(tmp_path):
    path = tmp_path / "media.csv"
    write_entries(path, sample_entries())
    console, out, _ = make_console("1\nyes\n")
    removed = delete_entry(path, console)
    assert removed == sample_entries()[0]
    assert load_entries(path) == sample_entries()[1:]
    assert "Entry deleted successfully." in out.getvalue()


def test_delete_entry_declined(tmp_path):
    path = tmp_path / "media.csv"
    write_entries(path, sample_entries())
    console, out, _ = make_console("3\nn\n")
    assert delete_entry(path, console) is None
    assert load_entries(path) == sample_entries()
    assert "Deletion cancelled." in out.getvalue()


def test_delete_entry_out_of_range(tmp_path):
    path = tmp_path / "media.csv"
    write_entries(path, sample_entries())
    console, out, _ = make_console("4\n")
    assert delete_entry(path, console) is None
    assert load_entries(path) == sample_entries()
    assert "Deletion cancelled." in out.getvalue()


def test_read_entries_pages_through_matches(tmp_path):
    path = tmp_path / "media.csv"
    write_entries(path, sample_entries())
    console, out, _ = make_console("5\n  DRAMA \n1\n1\n")
    shown = read_entries(path, console)
    assert shown == sample_entries()[:2]
    text = out.getvalue()
    assert "Match #1:" in text and "Match #2:" in text
    assert "You've reached the end of the matching entries." in text


def test_read_entries_exit_early(tmp_path):
    path = tmp_path / "media.csv"
    write_entries(path, sample_entries())
    console, out, _ = make_console("5\ndrama\nx\n2\n")
    shown = read_entries(path, console)
    assert shown == sample_entries()[:1]
    text = out.getvalue()
    assert "Invalid input. Please try again." in text
    assert "Exiting reading mode. Thank you!" in text
    assert "You've reached the end" not in text


def test_read_entries_no_match(tmp_path):
    path = tmp_path / "media.csv"
    write_entries(path, sample_entries())
    console, out, _ = make_console("1\nzzz\n")
    assert read_entries(path, console) == []
    assert "No matching entries found." in out.getvalue()


def test_read_entries_invalid_field(tmp_path):
    path = tmp_path / "media.csv"
    write_entries(path, sample_entries())
    console, out, _ = make_console("8\n")
    assert read_entries(path, console) == []
    assert "Invalid field choice. Exiting." in out.getvalue()


def test_read_entries_missing_file(tmp_path):
    console, out, err = make_console("1\nx\n")
    assert read_entries(tmp_path / "missing.csv", console) == []
    assert err.getvalue().startswith("Failed to open file")
    assert out.getvalue() == ""