"""Convert HelloReport PDFs into Wooma JSON documents."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from wooma_import.config import settings
from wooma_import.errors import MalformedOutputError, ReportImportError
from wooma_import.extraction.normalize import normalize_text
from wooma_import.extraction.parser import parse_report
from wooma_import.ingestion.pdf_text import extract_pdf_text
from wooma_import.ingestion.scan_reports import discover_reports
from wooma_import.mapping.wooma_mapper import map_to_wooma
from wooma_import.models.wooma import WoomaDocument
from wooma_import.utils.identifiers import IdFactory, generate_id, next_id

logger = logging.getLogger(__name__)


def resolve_identifiers(
    user_id: Optional[str] = None,
    property_id: Optional[str] = None,
    report_type_id: Optional[str] = None,
) -> Tuple[str, str, str]:
    """Fill missing Wooma ids from settings, then from placeholder UUIDs."""
    resolved: List[str] = []
    for label, explicit, fallback in (
        ("user_id", user_id, settings.default_user_id),
        ("property_id", property_id, settings.default_property_id),
        ("report_type_id", report_type_id, settings.default_report_type_id),
    ):
        value = explicit or fallback
        if not value:
            value = next_id(generate_id)
            logger.warning("No %s supplied; using placeholder %s", label, value)
        resolved.append(value)
    return resolved[0], resolved[1], resolved[2]


def convert_text(
    raw_text: str,
    user_id: str,
    property_id: str,
    report_type_id: str,
    id_factory: IdFactory = generate_id,
) -> WoomaDocument:
    """Normalize, parse and map one report's text."""
    parsed = parse_report(normalize_text(raw_text))
    document = map_to_wooma(parsed, user_id, property_id, report_type_id, id_factory)
    logger.info(
        "Mapped %s rooms, %s meters, %s keys, %s detectors",
        len(parsed.rooms),
        len(parsed.meters),
        len(parsed.keys),
        len(parsed.detectors),
    )
    return document


def write_debug_text(pdf_path: Path, text: str) -> Path:
    debug_dir = settings.debug_text_dir_path
    debug_dir.mkdir(parents=True, exist_ok=True)
    debug_path = debug_dir / f"{pdf_path.stem}.raw.txt"
    debug_path.write_text(text, encoding="utf-8")
    logger.debug("Wrote normalized text to %s", debug_path)
    return debug_path


def convert_pdf(
    pdf_path: Union[str, Path],
    user_id: str,
    property_id: str,
    report_type_id: str,
    id_factory: IdFactory = generate_id,
) -> WoomaDocument:
    pdf_path = Path(pdf_path)
    raw_text = extract_pdf_text(pdf_path)
    if settings.write_debug_text:
        write_debug_text(pdf_path, normalize_text(raw_text))
    return convert_text(raw_text, user_id, property_id, report_type_id, id_factory)


def serialize_document(document: WoomaDocument) -> str:
    try:
        return json.dumps(
            document.model_dump(mode="json"),
            indent=settings.json_indent,
            ensure_ascii=False,
        )
    except (TypeError, ValueError) as exc:
        raise MalformedOutputError(f"Failed to encode JSON: {exc}") from exc


def write_document(document: WoomaDocument, output_path: Union[str, Path]) -> Path:
    output_path = Path(output_path)
    payload = serialize_document(document)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(payload, encoding="utf-8")
    except OSError as exc:
        raise MalformedOutputError(f"Failed to write {output_path}: {exc}") from exc
    logger.info("Wrote Wooma JSON to %s", output_path)
    return output_path


def default_output_path(pdf_path: Path) -> Path:
    return settings.output_dir_path / f"{pdf_path.stem}.json"


def convert_all(
    user_id: Optional[str] = None,
    property_id: Optional[str] = None,
    report_type_id: Optional[str] = None,
) -> int:
    """Convert every discovered report; returns the number of failures."""
    sources = discover_reports()
    if not sources:
        logger.error("No report PDFs found. Update REPORTS_ROOT and retry.")
        return 0

    failures = 0
    for source in sources:
        ids = resolve_identifiers(user_id, property_id, report_type_id)
        pdf_path = Path(source.source_path)
        try:
            document = convert_pdf(pdf_path, *ids)
            write_document(document, default_output_path(pdf_path))
        except ReportImportError as exc:
            failures += 1
            logger.error("Failed to convert %s: %s", pdf_path, exc)
    logger.info("Converted %s of %s reports", len(sources) - failures, len(sources))
    return failures


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wooma-parse",
        description="Convert text-based HelloReport PDFs into Wooma JSON (no OCR, no inference).",
    )
    parser.add_argument("pdf", nargs="?", help="Report PDF. Omit to convert everything under REPORTS_ROOT.")
    parser.add_argument("--user-id", dest="user_id")
    parser.add_argument("--property-id", dest="property_id")
    parser.add_argument("--report-type-id", dest="report_type_id")
    parser.add_argument("--output", help="Output JSON path (defaults to OUTPUT_DIR/<pdf name>.json).")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(level=settings.log_level)

    if not args.pdf:
        failures = convert_all(args.user_id, args.property_id, args.report_type_id)
        return 1 if failures else 0

    pdf_path = Path(args.pdf)
    output_path = Path(args.output) if args.output else default_output_path(pdf_path)
    try:
        ids = resolve_identifiers(args.user_id, args.property_id, args.report_type_id)
        document = convert_pdf(pdf_path, *ids)
        write_document(document, output_path)
    except ReportImportError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    print(f"OK: Wrote JSON to {output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
