"""Command-line entry point for surface reports and documentation pages."""

import argparse
import logging
from pathlib import Path

from api_surface.errors import ApiSurfaceError
from api_surface.run_generation import run_generation


def main(argv: list[str] | None = None) -> int:
    """Run the selected generation step."""
    ap = argparse.ArgumentParser(
        description=(
            "Generate API surface reports and YAML documentation pages from "
            "API metadata."
        ),
    )
    ap.add_argument("--config", help="Path to configuration file")
    ap.add_argument(
        "--verbose", action="store_true", help="Log every file that is written"
    )
    sub = ap.add_subparsers(dest="command", required=True)

    report = sub.add_parser(
        "report", help="Write a <package>.api.ts surface report per *.items.json"
    )
    report.add_argument("input_dir", type=Path, help="Folder with *.items.json files")
    report.add_argument("out_dir", type=Path, help="Folder for the report files")

    pages = sub.add_parser(
        "pages", help="Write one <pageId>.yaml page per documented API item"
    )
    pages.add_argument("input_dir", type=Path, help="Folder with *.api.json files")
    pages.add_argument("out_dir", type=Path, help="Folder for the YAML pages")
    pages.add_argument(
        "--keep-stale",
        action="store_true",
        help="Do not delete *.yaml files left over from earlier runs",
    )
    pages.add_argument(
        "--check-links",
        action="store_true",
        help="Fail if a page links to a page id that was not generated",
    )

    args = ap.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return run_generation(args)
    except (ApiSurfaceError, ValueError) as e:
        raise SystemExit(f"Error: {e}") from e


if __name__ == "__main__":
    raise SystemExit(main())
