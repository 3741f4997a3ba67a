"""Testes da extração de Subject/Content-Type e corpo."""

from __future__ import annotations

from smtp.message import ParsedData, parse_message_data, split_headers_and_body


class TestSplitHeadersAndBody:
    """Separação na primeira linha em branco."""

    def test_without_separator_everything_is_body(self) -> None:
        assert split_headers_and_body("hello\r\nworld\r\n") == ("", "hello\r\nworld\r\n")

    def test_splits_on_first_blank_line_only(self) -> None:
        data = "Subject: Hi\r\n\r\npart one\r\n\r\npart two\r\n"
        assert split_headers_and_body(data) == ("Subject: Hi", "part one\r\n\r\npart two\r\n")


class TestParseMessageData:
    """Campos extraídos dos headers."""

    def test_subject_and_plain_body(self) -> None:
        parsed = parse_message_data("Subject: Hi\r\n\r\nhello\r\n")
        assert parsed == ParsedData(subject="Hi", is_html=False, body="hello\r\n")

    def test_subject_case_insensitive_and_last_one_wins(self) -> None:
        data = "SUBJECT: first\r\nsubject:   second  \r\n\r\nbody\r\n"
        assert parse_message_data(data).subject == "second"

    def test_html_content_type(self) -> None:
        data = "Subject: Hi\r\nContent-Type: text/html; charset=utf-8\r\n\r\n<p>x</p>\r\n"
        parsed = parse_message_data(data)
        assert parsed.is_html is True
        assert parsed.body == "<p>x</p>\r\n"

    def test_plain_content_type_is_not_html(self) -> None:
        data = "Content-Type: text/plain\r\n\r\nx\r\n"
        assert parse_message_data(data).is_html is False

    def test_headers_ignored_without_separator(self) -> None:
        """Sem linha em branco não há headers: Subject fica vazio."""
        parsed = parse_message_data("Subject: Hi\r\nhello\r\n")
        assert parsed.subject == ""
        assert parsed.body == "Subject: Hi\r\nhello\r\n"

    def test_subject_in_body_is_ignored(self) -> None:
        parsed = parse_message_data("From: a\r\n\r\nSubject: not a header\r\n")
        assert parsed.subject == ""

    def test_empty_data(self) -> None:
        assert parse_message_data("") == ParsedData()
