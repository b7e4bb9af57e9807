"""Orchestration logic for generating surface reports and documentation pages."""

import argparse
import logging
from pathlib import Path
from typing import Any

from api_surface.build_pages import build_pages
from api_surface.find_broken_links import find_broken_links
from api_surface.load_api_package import ITEMS_JSON_SUFFIX, load_api_package
from api_surface.load_config import load_config
from api_surface.load_doc_package import API_JSON_SUFFIX, load_doc_package
from api_surface.page_records import Page
from api_surface.write_page_files import (
    PageFileWriter,
    check_unique_page_ids,
    delete_stale_pages,
)
from api_surface.write_surface_report import write_surface_report

logger = logging.getLogger(__name__)


def _input_files(input_dir: Path, suffix: str) -> list[Path]:
    files = sorted(
        p
        for p in input_dir.rglob("*")
        if p.is_file() and p.name.lower().endswith(suffix)
    )
    if not files:
        msg = f"No {suffix} files found under: {input_dir}"
        raise SystemExit(msg)
    return files


def run_generation(args: argparse.Namespace) -> int:
    """Execute the command selected on the command line."""
    config = load_config(args.config)
    if args.command == "report":
        return generate_reports(args.input_dir, args.out_dir, config)
    if getattr(args, "keep_stale", False):
        config["pages"]["delete_stale"] = False
    if getattr(args, "check_links", False):
        config["pages"]["check_links"] = True
    return generate_pages(args.input_dir, args.out_dir, config)


def generate_reports(input_dir: Path, out_dir: Path, config: dict[str, Any]) -> int:
    """Write one surface report per ``*.items.json`` file."""
    report_cfg = config["report"]
    out_root = out_dir.resolve()
    written = 0
    for f in _input_files(input_dir, ITEMS_JSON_SUFFIX):
        print(f"Reading {f.name}")
        package = load_api_package(f)
        out_file = write_surface_report(
            package,
            out_root,
            suffix=report_cfg["file_suffix"],
            indent=report_cfg["indent"],
        )
        print(f"Writing {package.name} report to {out_file.name}")
        written += 1
    print(f"Generated {written} surface reports into: {out_root}")
    return 0


def generate_pages(input_dir: Path, out_dir: Path, config: dict[str, Any]) -> int:
    """Build pages for every ``*.api.json`` file and write them as YAML."""
    pages_cfg = config["pages"]
    out_root = out_dir.resolve()
    out_root.mkdir(parents=True, exist_ok=True)

    # Build and check everything first; a bad input leaves old output alone.
    all_pages: list[Page] = []
    for f in _input_files(input_dir, API_JSON_SUFFIX):
        print(f"Reading {f.name}")
        doc_package = load_doc_package(f)
        print(f"Building {doc_package.name} package")
        all_pages.extend(build_pages(doc_package).all_pages())
    check_unique_page_ids(all_pages)

    if pages_cfg["delete_stale"]:
        print(f"Deleting old *{pages_cfg['file_extension']} files...")
        delete_stale_pages(out_root, pages_cfg["file_extension"])

    writer = PageFileWriter(
        out_root,
        extension=pages_cfg["file_extension"],
        line_width=pages_cfg["line_width"],
    )
    written = writer.write_all(all_pages)
    print(f"Generated {written} pages into: {out_root}")

    if pages_cfg["check_links"]:
        broken = find_broken_links(all_pages)
        for source, target in broken:
            logger.warning("Broken link on %s: %s", source, target)
        if broken:
            print(f"Found {len(broken)} broken links")
            return 1
    return 0
