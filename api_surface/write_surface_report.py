"""Logic for writing surface reports to disk."""

import logging
from pathlib import Path

from api_surface.api_item import ApiPackage
from api_surface.page_id import unscoped_package_name
from api_surface.surface_report import render_surface_report

logger = logging.getLogger(__name__)


def report_file_for_package(out_root: Path, package_name: str, suffix: str) -> Path:
    """Determine the report file for a package: ``out_root/widgets.api.ts``."""
    return out_root / (unscoped_package_name(package_name) + suffix)


def write_surface_report(
    package: ApiPackage,
    out_root: Path,
    *,
    suffix: str = ".api.ts",
    indent: str = "  ",
) -> Path:
    """Render the report completely, then write it in one go."""
    content = render_surface_report(package, indent=indent)
    out_file = report_file_for_package(out_root, package.name, suffix)
    out_file.parent.mkdir(parents=True, exist_ok=True)
    # The text is already CRLF-normalized; write bytes so nothing converts it again.
    out_file.write_bytes(content.encode("utf-8"))
    logger.debug("Wrote %s", out_file)
    return out_file
