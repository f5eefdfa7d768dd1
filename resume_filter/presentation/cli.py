import argparse
import asyncio
import logging
import sys
from pathlib import Path

from resume_filter.config.settings import Settings, settings
from resume_filter.container import Container, configure_container
from resume_filter.core.models.document import DocumentStore, IngestResult
from resume_filter.core.models.files import LocalFile, RawFile, filter_pdf
from resume_filter.core.services.ingest_service import IngestService, summarize_errors
from resume_filter.core.services.search_service import SearchService
from resume_filter.presentation.formatting import render_view

logger = logging.getLogger(__name__)


def collect_files(paths: list[str]) -> list[RawFile]:
    """Expand paths into file handles; directories contribute their files."""
    files: list[RawFile] = []
    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            files.extend(LocalFile(p) for p in sorted(path.iterdir()) if p.is_file())
        else:
            files.append(LocalFile(path))
    return files


def load_batch(
    paths: list[str], app_container: Container, config: Settings
) -> IngestResult:
    """Ingest one user batch into an empty store and report failures."""
    files = filter_pdf(collect_files(paths), config.accepted_media_types)
    if not files:
        logger.warning("No PDF files selected")

    ingest_service = app_container.resolve(IngestService)
    result = asyncio.run(ingest_service.ingest(files, DocumentStore()))

    notice = summarize_errors(result.errors)
    if notice:
        print(f"An Error Occurred\n{notice}\n", file=sys.stderr)
    return result


def cmd_rank(args: argparse.Namespace, app_container: Container, config: Settings) -> int:
    """Rank command - ingest files and list them against keywords."""
    result = load_batch(args.paths or [config.docs_path], app_container, config)
    search_service = app_container.resolve(SearchService)
    view = search_service.view(result.store, args.keywords)
    print(render_view(view, result.store, config.preview_length))
    return 0


def cmd_show(args: argparse.Namespace, app_container: Container, config: Settings) -> int:
    """Show command - print the full text of one document."""
    result = load_batch(args.paths or [config.docs_path], app_container, config)
    doc = result.store.by_name(args.name)
    if doc is None:
        print(f"Document not found: {args.name}", file=sys.stderr)
        return 1

    print(doc.name)
    print()
    print(doc.content)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="resume-filter",
        description="Upload PDF resumes and find the best candidates instantly.",
    )
    sub = parser.add_subparsers(dest="command")

    rank = sub.add_parser("rank", help="rank documents by keywords")
    rank.add_argument("paths", nargs="*", help="PDF files or directories")
    rank.add_argument(
        "-k",
        "--keywords",
        default="",
        help="keywords separated by commas (e.g. react, nodejs, python)",
    )
    rank.set_defaults(handler=cmd_rank)

    show = sub.add_parser("show", help="print the text of one document")
    show.add_argument("paths", nargs="*", help="PDF files or directories")
    show.add_argument("--name", required=True, help="file name of the document")
    show.set_defaults(handler=cmd_show)

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_usage()
        return 1

    logging.basicConfig(level=settings.log_level, format="%(message)s")
    app_container = configure_container(settings, Container())
    return args.handler(args, app_container, settings)


if __name__ == "__main__":
    sys.exit(main())
