"""Logic for writing documentation pages as YAML files."""

import logging
from collections.abc import Iterable
from pathlib import Path

import yaml

from api_surface.errors import DuplicatePageIdError
from api_surface.page_records import Page
from api_surface.page_to_dict import page_to_dict
from api_surface.validate_no_undefined_members import validate_no_undefined_members

logger = logging.getLogger(__name__)


def delete_stale_pages(out_root: Path, extension: str = ".yaml") -> int:
    """Delete page files left over from a previous run."""
    deleted = 0
    if not out_root.is_dir():
        return deleted
    for p in sorted(out_root.iterdir()):
        if p.is_file() and p.name.lower().endswith(extension.lower()):
            p.unlink()
            deleted += 1
    logger.info("Deleted %d old %s files from %s", deleted, extension, out_root)
    return deleted


def dump_page(page: Page, line_width: int = 120) -> str:
    """Validate a page and serialize it as CRLF-terminated YAML."""
    value = page_to_dict(page)
    validate_no_undefined_members(value)
    text = yaml.safe_dump(
        value,
        width=line_width,
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )
    return "\r\n".join(text.split("\n"))


def check_unique_page_ids(pages: Iterable[Page]) -> None:
    """Raise DuplicatePageIdError for the first page id that repeats."""
    seen: set[str] = set()
    for page in pages:
        pid = page.header.page_id
        if pid in seen:
            raise DuplicatePageIdError(pid)
        seen.add(pid)


class PageFileWriter:
    """Writes pages into one folder, refusing to emit a page id twice."""

    def __init__(
        self, out_root: Path, extension: str = ".yaml", line_width: int = 120
    ) -> None:
        """Initialize the writer for an output folder."""
        self.out_root = out_root
        self.extension = extension
        self.line_width = line_width
        self.written: set[str] = set()

    def write(self, page: Page) -> Path:
        """Write one page as ``<pageId><extension>``."""
        pid = page.header.page_id
        if pid in self.written:
            raise DuplicatePageIdError(pid)
        content = dump_page(page, self.line_width)
        out_file = self.out_root / (pid + self.extension)
        out_file.parent.mkdir(parents=True, exist_ok=True)
        out_file.write_bytes(content.encode("utf-8"))
        self.written.add(pid)
        logger.debug("Wrote %s", out_file)
        return out_file

    def write_all(self, pages: Iterable[Page]) -> int:
        """Write every page and return how many were written."""
        count = 0
        for page in pages:
            self.write(page)
            count += 1
        return count
