"""Tests for the file-backed document host."""

from rfcnav.core.models import Position, Range
from rfcnav.host.prompt import ConsolePrompt
from rfcnav.host.workspace import TextDocument, Workspace


class TestTextDocument:
    """Tests for TextDocument."""

    def test_lines_and_text(self):
        document = TextDocument("one\r\ntwo\r\n\f\r\nthree")

        assert document.line_count() == 4
        assert document.line_text(2) == "\f"
        assert document.line_text(99) == ""
        assert document.get_text() == "one\ntwo\n\f\nthree"
        assert document.last_row() == 3

    def test_position_for_offset(self):
        document = TextDocument("ab\ncde\nf")

        assert document.position_for_offset(0) == Position(0, 0)
        assert document.position_for_offset(3) == Position(1, 0)
        assert document.position_for_offset(5) == Position(1, 2)
        assert document.position_for_offset(100) == Position(2, 1)

    def test_selection_is_clipped(self):
        document = TextDocument("ab\ncde")

        document.set_selected_range(Range(Position(-1, 0), Position(7, 9)))

        assert document.get_selected_range() == Range(Position(0, 0), Position(1, 3))

    def test_visible_rows(self):
        document = TextDocument("\n".join(str(n) for n in range(100)), rows_per_page=10)

        document.scroll_to(Position(50, 0))
        assert document.visible_rows() == range(41, 51)

        document.scroll_to(Position(50, 0), center=True)
        assert document.visible_rows() == range(45, 55)

        document.scroll_to(Position(2, 0))
        assert document.visible_rows() == range(0, 10)

    def test_is_rfc(self, tmp_path):
        assert TextDocument("", path=tmp_path / "rfc2223.txt").is_rfc
        assert not TextDocument("", path=tmp_path / "notes.txt").is_rfc
        assert not TextDocument("").is_rfc


class TestWorkspace:
    """Tests for Workspace."""

    def test_open_and_find(self, tmp_path):
        path = tmp_path / "rfc1.txt"
        path.write_text("hello\nworld\n", encoding="utf-8")
        workspace = Workspace(rows_per_page=7)

        assert workspace.find_open(path) is None
        document = workspace.open(path)

        assert workspace.find_open(path) is document
        assert workspace.open(path) is document
        assert workspace.active_document is document
        assert document.rows_per_page == 7
        assert document.line_text(1) == "world"

    def test_notify_error(self):
        workspace = Workspace()

        workspace.notify_error("Failed to download RFC 1", "status 404")

        assert workspace.notifications[0].message == "Failed to download RFC 1"
        assert workspace.notifications[0].detail == "status 404"


class TestConsolePrompt:
    """Tests for ConsolePrompt."""

    def test_returns_entered_value(self):
        labels = []
        prompt = ConsolePrompt(lambda label: labels.append(label) or " 42 ")

        assert prompt.prompt("Enter a page number") == "42"
        assert labels == ["Enter a page number: "]

    def test_default_and_cancel(self):
        assert ConsolePrompt(lambda label: "").prompt("RFC", default="2223") == "2223"
        assert ConsolePrompt(lambda label: "").prompt("RFC") is None

        def raise_eof(label):
            raise EOFError

        assert ConsolePrompt(raise_eof).prompt("RFC") is None
