import pytest

from wooma_import.extraction.normalize import normalize_text, strip_links


def test_line_endings_collapse_to_newline():
    assert normalize_text("a\r\nb\rc\nd") == "a\nb\nc\nd"


def test_horizontal_whitespace_collapses_to_single_space():
    assert normalize_text("Living \t  Room   Good") == "Living Room Good"


def test_blank_line_runs_collapse_to_one_blank_line():
    assert normalize_text("Question?\n\n\n\n\nNO") == "Question?\n\nNO"
    assert normalize_text("Question?\n\nNO") == "Question?\n\nNO"


def test_outer_whitespace_trimmed():
    assert normalize_text("\n\n  Report  \n\n") == "Report"


def test_non_string_input_rejected():
    with pytest.raises(TypeError):
        normalize_text(b"bytes")


def test_strip_links_removes_urls_only():
    text = "Scuff on wall https://cdn.example.com/a.jpg\nhttp://x.y/z Door"
    assert strip_links(text) == "Scuff on wall \n Door"


def test_strip_links_leaves_plain_text():
    assert strip_links("Kitchen: tiles cracked") == "Kitchen: tiles cracked"


def test_whitespace_only_lines_count_as_blank():
    assert normalize_text("Q?\n \n \n \n \nNO") == "Q?\n\nNO"
    assert normalize_text("Q?\n\t\n \n\nNO") == "Q?\n\nNO"


def test_strip_links_keeps_text_glued_to_link():
    assert strip_links("Crack-https://cdn.x/a.jpg") == "Crack-"
    assert strip_links("Stain.http://cdn.x/b.jpg on carpet") == "Stain. on carpet"


def test_strip_links_handles_other_schemes():
    assert strip_links("Plan ftp://files.example/plan.pdf attached") == "Plan  attached"
    assert strip_links("Backup s3://bucket/report.pdf") == "Backup "
