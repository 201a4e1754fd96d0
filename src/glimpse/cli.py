"""CLI entry point for Glimpse.

Usage:
    glimpse serve --port 8000 --reload
    glimpse analyze photo.png notes.txt report.pdf data.csv
"""

import argparse
import json
import random
import sys
from collections.abc import Sequence
from dataclasses import asdict
from pathlib import Path

import uvicorn

from glimpse.config import Settings, get_settings
from glimpse.core.exceptions import GlimpseError, UnsupportedFileError
from glimpse.core.logging import get_logger, setup_logging
from glimpse.processing.dispatch import FileKind, decode_text, detect_file_kind
from glimpse.processing.explain import generate_shap_values, parse_csv_features
from glimpse.processing.image import ImageClassifier
from glimpse.processing.pdf import extract_pdf_text
from glimpse.processing.sentiment import SentimentLexicon
from glimpse.processing.text import analyze_text

logger = get_logger(__name__)


def analyze_path(path: Path, settings: Settings, rng: random.Random) -> dict[str, object]:
    """Run the analyzer matching a local file's suffix.

    Raises:
        UnsupportedFileError: If no analyzer handles the file kind.
        GlimpseError: If the analyzer rejects the content.
    """
    kind = detect_file_kind(path.name, None)
    data = path.read_bytes()

    if kind == FileKind.IMAGE:
        classifier = ImageClassifier(
            rng=rng,
            max_dimension=settings.image_max_dimension,
            max_bytes=settings.max_upload_bytes,
        )
        return {"kind": kind.value, **asdict(classifier.analyze(data, path.name))}

    if kind == FileKind.TEXT:
        report = analyze_text(
            decode_text(data),
            word_limit=settings.word_frequency_limit,
            phrase_limit=settings.key_phrase_limit,
            lexicon=SentimentLexicon.from_json_file(settings.lexicon_path),
        )
        return {"kind": kind.value, **asdict(report)}

    if kind == FileKind.PDF:
        document = extract_pdf_text(data, settings.pdf_max_pages)
        report = analyze_text(
            document.text,
            word_limit=settings.word_frequency_limit,
            phrase_limit=settings.key_phrase_limit,
            lexicon=SentimentLexicon.from_json_file(settings.lexicon_path),
        )
        return {
            "kind": kind.value,
            "page_count": document.page_count,
            "pages_read": document.pages_read,
            **asdict(report),
        }

    if kind == FileKind.TABULAR:
        features = parse_csv_features(decode_text(data))
        return {
            "kind": kind.value,
            "features": features,
            "shap_values": [asdict(v) for v in generate_shap_values(features, rng)],
        }

    raise UnsupportedFileError(f"No analyzer for {kind.value} files: {path.name}")


def _serve(args: argparse.Namespace) -> int:
    uvicorn.run(
        "glimpse.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_config=None,  # keep the structlog handler installed at startup
    )
    return 0


def _analyze(args: argparse.Namespace) -> int:
    settings = get_settings()
    setup_logging(settings)
    rng = random.Random(settings.random_seed)

    status = 0
    for path in args.files:
        try:
            result = analyze_path(path, settings, rng)
        except (GlimpseError, OSError) as e:
            logger.error("Analysis failed", path=str(path), error=str(e))
            status = 1
            continue
        print(json.dumps({"path": str(path), **result}, indent=args.indent, default=str))
    return status


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="glimpse", description="Glimpse")
    commands = parser.add_subparsers(dest="command")

    serve = commands.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--reload", action="store_true", help="Enable auto-reload")
    serve.add_argument("--host", default="0.0.0.0", help="Bind host")
    serve.add_argument("--port", type=int, default=8000, help="Bind port")
    serve.set_defaults(handler=_serve)

    analyze = commands.add_parser("analyze", help="Analyze local files and print JSON")
    analyze.add_argument("files", nargs="+", type=Path, help="Image, text, PDF or CSV files")
    analyze.add_argument("--indent", type=int, default=2, help="JSON indent")
    analyze.set_defaults(handler=_analyze)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        # Bare `glimpse` keeps serving with defaults
        args = parser.parse_args(["serve", *(argv or [])])
    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())
