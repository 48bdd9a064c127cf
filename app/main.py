import argparse
import asyncio
import sys
from pathlib import Path
from typing import Optional, Sequence

import uvicorn
from dotenv import load_dotenv

from infrastructure.configuration import Settings
from infrastructure.logging import configure_logging, get_module_logger
from infrastructure.services import get_settings
from modules.content import ContentBuildError, SitePipeline
from modules.preview import create_preview_app, verify_site

logger = get_module_logger()


def build(settings: Settings, output_dir: Optional[Path] = None) -> int:
    """Build the site into the output directory."""
    try:
        written = SitePipeline(settings).run(output_dir)
    except ContentBuildError as e:
        logger.error("build_failed", error=str(e), source=e.source)
        return 1
    logger.info("build_succeeded", files=len(written))
    return 0


def serve(settings: Settings, site_root: Path) -> int:
    """Serve a built site until interrupted."""
    if not site_root.is_dir():
        logger.error("site_root_missing", site_root=str(site_root))
        return 1
    logger.info(
        "preview_starting",
        url=f"http://{settings.preview.PREVIEW_HOST}:{settings.preview.PREVIEW_PORT}/",
        site_root=str(site_root),
    )
    uvicorn.run(
        create_preview_app(site_root),
        host=settings.preview.PREVIEW_HOST,
        port=settings.preview.PREVIEW_PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )
    return 0


def verify(settings: Settings, site_root: Path) -> int:
    """Walk the built site with page transitions and report failures."""
    report = asyncio.run(verify_site(site_root, settings))
    for path, problem in report.failures:
        logger.error("page_not_verified", path=path, problem=problem)
    return 0 if report.ok else 1


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="folio", description="Build, preview and verify the personal site."
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    build_parser = subparsers.add_parser("build", help="Build the site.")
    build_parser.add_argument("--output", type=Path, help="Output directory.")
    build_parser.add_argument(
        "--serve", action="store_true", help="Serve the site after building."
    )

    serve_parser = subparsers.add_parser("serve", help="Serve a built site.")
    serve_parser.add_argument("--root", type=Path, help="Built site directory.")

    verify_parser = subparsers.add_parser(
        "verify", help="Navigate a built site with page transitions."
    )
    verify_parser.add_argument("--root", type=Path, help="Built site directory.")

    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main function to run the command line."""
    load_dotenv()
    settings = get_settings()
    configure_logging(settings=settings)
    args = parse_args(argv)

    output_dir = settings.build.OUTPUT_DIR

    if args.command == "build":
        status = build(settings, args.output)
        if status == 0 and args.serve:
            return serve(settings, args.output or output_dir)
        return status

    site_root = args.root or output_dir
    if args.command == "serve":
        return serve(settings, site_root)
    return verify(settings, site_root)


if __name__ == "__main__":
    sys.exit(main())
