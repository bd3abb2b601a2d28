import json

import fitz
import pytest

from wooma_import.config import settings
from wooma_import.errors import InputUnavailableError
from wooma_import.extraction.parser import parse_report
from wooma_import.ingestion import parse_reports
from wooma_import.ingestion.parse_reports import (
    convert_pdf,
    convert_text,
    main,
    resolve_identifiers,
    serialize_document,
    write_document,
)
from wooma_import.ingestion.pdf_text import extract_pdf_text
from wooma_import.ingestion.scan_reports import discover_reports

COVER_TEXT = "Inventory / Check In\nfor\n2 Riverhead Gardens, Driffield, YO25 6AA"


def _make_pdf(path, text=COVER_TEXT, **save_options):
    doc = fitz.open()
    page = doc.new_page()
    page.insert_text((72, 72), text)
    doc.save(str(path), **save_options)
    doc.close()
    return path


def _make_locked_pdf(path):
    return _make_pdf(
        path,
        encryption=fitz.PDF_ENCRYPT_AES_256,
        owner_pw="owner-secret",
        user_pw="user-secret",
    )


def test_parse_report_strips_links_before_extraction(report_text):
    parsed = parse_report(report_text)
    assert "http" not in (parsed.rooms[0].defects or "")
    assert parsed.rooms[1].defects is None


def test_parse_report_rejects_non_string():
    with pytest.raises(TypeError):
        parse_report(42)


def test_convert_text_normalizes_raw_input(raw_report_text, sequential_ids):
    raw = raw_report_text.replace("\n", "\r\n").replace("Jane Smith", "Jane   Smith")
    document = convert_text(raw, "u", "p", "t", sequential_ids)
    report = document.property.reports[0]
    assert document.property.address == "2 Riverhead Gardens"
    assert len(report.rooms) == 3
    assert len(report.meters) == 2


def test_serialized_json_keeps_unicode_and_slashes(sequential_ids):
    document = convert_text(
        "Inventory / Check In\nfor\nCafé Cottage, Hull, HU1 1AA\nInspection Areas\n1: Entrance/Hallway",
        "u",
        "p",
        "t",
        sequential_ids,
    )
    payload = serialize_document(document)
    assert "Café Cottage" in payload
    assert "Entrance/Hallway" in payload
    assert json.loads(payload)["property"]["city"] == "Hull"


def test_write_document_creates_parent_dirs(tmp_path, sequential_ids):
    document = convert_text("Some text", "u", "p", "t", sequential_ids)
    output = write_document(document, tmp_path / "nested" / "out.json")
    data = json.loads(output.read_text(encoding="utf-8"))
    assert data["property"]["reports"][0]["status"] == "IN_PROGRESS"
    assert data["property"]["address"] is None


def test_resolve_identifiers_prefers_explicit_then_settings(monkeypatch):
    monkeypatch.setattr(settings, "default_user_id", "settings-user")
    monkeypatch.setattr(settings, "default_property_id", None)
    monkeypatch.setattr(settings, "default_report_type_id", None)

    user_id, property_id, report_type_id = resolve_identifiers(None, "explicit-property", None)
    assert user_id == "settings-user"
    assert property_id == "explicit-property"
    assert report_type_id


def test_extract_pdf_text_reads_text_layer(tmp_path):
    text = extract_pdf_text(_make_pdf(tmp_path / "report.pdf"))
    assert "Riverhead Gardens" in text


def test_extract_pdf_text_missing_file(tmp_path):
    with pytest.raises(InputUnavailableError):
        extract_pdf_text(tmp_path / "missing.pdf")


def test_extract_pdf_text_unreadable_file(tmp_path):
    broken = tmp_path / "broken.pdf"
    broken.write_bytes(b"not a pdf at all")
    with pytest.raises(InputUnavailableError):
        extract_pdf_text(broken)


def test_extract_pdf_text_password_protected(tmp_path):
    with pytest.raises(InputUnavailableError):
        extract_pdf_text(_make_locked_pdf(tmp_path / "locked.pdf"))


def test_cli_password_protected_pdf_fails_cleanly(tmp_path, capsys):
    locked = _make_locked_pdf(tmp_path / "locked.pdf")
    output = tmp_path / "out.json"

    assert main([str(locked), f"--output={output}"]) == 1
    assert "ERROR:" in capsys.readouterr().err
    assert not output.exists()


def test_batch_mode_continues_past_password_protected_pdf(tmp_path, monkeypatch):
    reports = tmp_path / "reports"
    reports.mkdir()
    _make_locked_pdf(reports / "a_locked.pdf")
    _make_pdf(reports / "b_open.pdf")
    monkeypatch.setattr(settings, "reports_root", str(reports))
    monkeypatch.setattr(settings, "output_dir", str(tmp_path / "result"))

    assert parse_reports.convert_all() == 1
    assert (tmp_path / "result" / "b_open.json").exists()
    assert not (tmp_path / "result" / "a_locked.json").exists()


def test_convert_pdf_writes_debug_text(tmp_path, monkeypatch, sequential_ids):
    monkeypatch.setattr(settings, "write_debug_text", True)
    monkeypatch.setattr(settings, "debug_text_dir", str(tmp_path / "debug"))
    document = convert_pdf(_make_pdf(tmp_path / "cover.pdf"), "u", "p", "t", sequential_ids)
    assert document.property.postcode == "YO25 6AA"
    assert (tmp_path / "debug" / "cover.raw.txt").exists()


def test_discover_reports(tmp_path):
    _make_pdf(tmp_path / "b.pdf")
    (tmp_path / "sub").mkdir()
    _make_pdf(tmp_path / "sub" / "a.pdf")
    (tmp_path / "notes.txt").write_text("ignored")
    assert [source.name for source in discover_reports(tmp_path)] == ["b", "a"]


def test_discover_reports_missing_root(tmp_path):
    assert discover_reports(tmp_path / "missing") == []


def test_cli_converts_single_pdf(tmp_path, capsys):
    pdf = _make_pdf(tmp_path / "report.pdf")
    output = tmp_path / "out.json"
    code = main([str(pdf), "--user-id=user-1", "--property-id=prop-1", "--report-type-id=type-1", f"--output={output}"])

    assert code == 0
    assert f"OK: Wrote JSON to {output}" in capsys.readouterr().out
    data = json.loads(output.read_text(encoding="utf-8"))
    assert data["property"]["user_id"] == "user-1"
    assert data["property"]["city"] == "Driffield"
    assert data["property"]["reports"][0]["property_id"] == "prop-1"


def test_cli_missing_pdf_fails(tmp_path, capsys):
    code = main([str(tmp_path / "missing.pdf"), f"--output={tmp_path / 'out.json'}"])
    assert code == 1
    assert "ERROR:" in capsys.readouterr().err
    assert not (tmp_path / "out.json").exists()


def test_cli_batch_mode(tmp_path, monkeypatch):
    reports = tmp_path / "reports"
    reports.mkdir()
    _make_pdf(reports / "first.pdf")
    monkeypatch.setattr(settings, "reports_root", str(reports))
    monkeypatch.setattr(settings, "output_dir", str(tmp_path / "result"))

    assert main([]) == 0
    assert (tmp_path / "result" / "first.json").exists()


def test_batch_mode_counts_failures(tmp_path, monkeypatch):
    reports = tmp_path / "reports"
    reports.mkdir()
    (reports / "broken.pdf").write_bytes(b"garbage")
    monkeypatch.setattr(settings, "reports_root", str(reports))
    monkeypatch.setattr(settings, "output_dir", str(tmp_path / "result"))

    assert parse_reports.convert_all() == 1
    assert main([]) == 1
