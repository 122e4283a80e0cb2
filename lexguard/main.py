import argparse
import asyncio
import json
import sys
from pathlib import Path

from lexguard.analysis.exceptions import AnalysisError, MissingCredentialsError
from lexguard.analysis.factory import AnalyzerFactory
from lexguard.analysis.models import Language
from lexguard.config.settings import Settings
from lexguard.documents.file_loader import FileLoader
from lexguard.logging.logger import Log
from lexguard.report.renderer import render_report


def build_parser(default_language: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lexguard",
        description="Analyze a legal document for risks under Kazakhstan law.",
    )
    parser.add_argument("path", type=Path, help="document to analyze")
    parser.add_argument(
        "--language",
        choices=[lang.value for lang in Language],
        default=default_language,
        help="report language",
    )
    parser.add_argument(
        "--deep",
        action="store_true",
        help="request elevated reasoning and web search",
    )
    parser.add_argument("--format", choices=["text", "json"], default="text")
    parser.add_argument("--mime-type", default=None, help="override the detected MIME type")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point: settings -> analyzer -> analyze one file -> print report."""
    settings = Settings()
    Log.configure(settings.log_level)
    args = build_parser(settings.default_language).parse_args(argv)

    try:
        document = FileLoader().load(args.path, mime_type=args.mime_type)
        analyzer = AnalyzerFactory.create(settings)
        result = asyncio.run(analyzer.analyze(document, args.language, args.deep))
    except MissingCredentialsError as exc:
        print(str(exc), file=sys.stderr)
        return 2
    except (AnalysisError, FileNotFoundError, ValueError) as exc:
        print(str(exc), file=sys.stderr)
        return 1

    if args.format == "json":
        print(json.dumps(result.to_payload(), ensure_ascii=False, indent=2))
    else:
        print(render_report(result, Language(args.language)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
