"""Command line entry point: ``elmerlint check`` and ``elmerlint serve``."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from elmerlint import __version__
from elmerlint.models.diagnostics import Diagnostic
from elmerlint.models.document import Document
from elmerlint.parser.dictionary import (
    DictionaryLoadError,
    KeywordDictionary,
    load_default_dictionary,
    load_dictionary,
)
from elmerlint.service.validation_service import ValidationService
from elmerlint.settings import Settings

logger = logging.getLogger("elmerlint.cli")

EXIT_CLEAN = 0
EXIT_FINDINGS = 1
EXIT_FATAL = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="elmerlint",
        description="Flag unknown keywords in Elmer solver input files",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    check = subparsers.add_parser("check", help="Validate one or more .sif files")
    check.add_argument("files", nargs="+", type=Path, help="Solver input files")
    check.add_argument("--keywords", type=Path, default=None,
                       help="Keyword dictionary (.json/.yaml); defaults to the bundled one")
    check.add_argument("--format", choices=["text", "json"], default="text",
                       help="Output format")

    serve = subparsers.add_parser("serve", help="Run the REST API server")
    serve.add_argument("--host", default=None, help="Bind address")
    serve.add_argument("--port", type=int, default=None, help="Listen port")
    serve.add_argument("--keywords", type=Path, default=None,
                       help="Keyword dictionary (.json/.yaml); defaults to the bundled one")
    return parser


def format_diagnostic(path: str, diagnostic: Diagnostic) -> str:
    """Render a finding as ``path:line:col: severity: message`` (one-based)."""
    start = diagnostic.range.start
    return (
        f"{path}:{start.line + 1}:{start.character + 1}: "
        f"{diagnostic.severity.value}: {diagnostic.message}"
    )


def _load_dictionary(path: Path | None) -> KeywordDictionary:
    if path is not None:
        return load_dictionary(path)
    return load_default_dictionary()


def _check(args: argparse.Namespace, settings: Settings) -> int:
    try:
        dictionary = _load_dictionary(args.keywords or settings.keywords_file)
    except DictionaryLoadError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_FATAL

    service = ValidationService(
        dictionary,
        language_id=settings.language_id,
        source=settings.diagnostic_source,
    )
    results: dict[str, list[Diagnostic]] = {}
    for path in args.files:
        try:
            text = path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as exc:
            print(f"error: cannot read {path}: {exc}", file=sys.stderr)
            return EXIT_FATAL
        document = Document(uri=str(path), text=text, language_id=settings.language_id)
        results[document.uri] = service.validate(document) or []

    if args.format == "json":
        payload = {
            uri: [d.model_dump(mode="json") for d in diagnostics]
            for uri, diagnostics in results.items()
        }
        print(json.dumps(payload, indent=2))
    else:
        for uri, diagnostics in results.items():
            for diagnostic in diagnostics:
                print(format_diagnostic(uri, diagnostic))

    total = sum(len(d) for d in results.values())
    logger.info("Checked %d file(s), %d finding(s)", len(results), total)
    return EXIT_FINDINGS if total else EXIT_CLEAN


def _serve(args: argparse.Namespace, settings: Settings) -> int:
    from elmerlint.api.app import main as serve_main

    updates: dict[str, object] = {}
    if args.host is not None:
        updates["api_server_host"] = args.host
    if args.port is not None:
        updates["api_server_port"] = args.port
        updates["port"] = None
    if args.keywords is not None:
        updates["keywords_file"] = args.keywords
    serve_main(settings.model_copy(update=updates))
    return EXIT_CLEAN


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())

    if args.command == "serve":
        return _serve(args, settings)
    return _check(args, settings)


if __name__ == "__main__":
    sys.exit(main())
