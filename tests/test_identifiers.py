import pytest

from vidai.core.exceptions import IdentifierFileError, NoIdentifiersError
from vidai.input import collect_identifiers, parse_identifiers, read_identifiers_file


def test_comments_blank_lines_and_whitespace_are_skipped() -> None:
    text = "\n".join(
        [
            "# videos for the spring launch",
            "  intro  ",
            "",
            "folder/keynote",
            "   # indented comment",
            "\toutro\t",
        ]
    )

    assert parse_identifiers(text) == ["intro", "folder/keynote", "outro"]


def test_windows_line_endings(tmp_path) -> None:
    path = tmp_path / "ids.txt"
    path.write_bytes(b"one\r\ntwo\r\n")

    assert read_identifiers_file(path) == ["one", "two"]


def test_missing_file_is_a_precondition_error(tmp_path) -> None:
    with pytest.raises(IdentifierFileError) as exc_info:
        read_identifiers_file(tmp_path / "missing.txt")

    assert "missing.txt" in exc_info.value.message
    assert exc_info.value.suggestions


def test_positional_ids_come_before_file_ids(tmp_path) -> None:
    path = tmp_path / "ids.txt"
    path.write_text("c\nd\n", encoding="utf-8")

    assert collect_identifiers(["a", "b"], path) == ["a", "b", "c", "d"]


def test_duplicates_are_kept() -> None:
    assert collect_identifiers(["a", "a"]) == ["a", "a"]


def test_comment_only_file_has_nothing_to_process(tmp_path) -> None:
    path = tmp_path / "ids.txt"
    path.write_text("# nothing yet\n\n   \n# still nothing\n", encoding="utf-8")

    with pytest.raises(NoIdentifiersError):
        collect_identifiers([], path)
