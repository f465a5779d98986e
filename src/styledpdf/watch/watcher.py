"""Poll a directory and convert new text and CSV files into PDFs.

Each poll lists the transport, keeps files with a configured extension,
skips files whose ``.pdf`` already exists and converts the rest on a thread
pool.  Every conversion renders onto its own canvas.  A failing file is
logged and reported in :class:`PollResult`; it never aborts the batch or the
polling loop.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import PurePath

from styledpdf.config import ConfigModel
from styledpdf.io import get_extension, parse_document
from styledpdf.io.writers.pdf_writer import build_font_registry, render_pdf
from styledpdf.surface import FontRegistry
from styledpdf.utils.logging import get_logger
from styledpdf.watch.transport import FileTransport

logger = get_logger(__name__)


def pdf_name(name: str) -> str:
    """Return the PDF file name for source file ``name``."""

    return PurePath(name).stem + ".pdf"


@dataclass(slots=True)
class PollResult:
    """Outcome of one poll."""

    converted: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    failed: dict[str, str] = field(default_factory=dict)


class DirectoryWatcher:
    """Convert files found on ``transport`` according to ``cfg``."""

    def __init__(
        self,
        transport: FileTransport,
        cfg: ConfigModel,
        *,
        fonts: FontRegistry | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.transport = transport
        self.cfg = cfg
        self.fonts = fonts or build_font_registry(cfg)
        self._sleep = sleep
        self._extensions = frozenset(cfg.watch.extensions)

    def candidates(self) -> tuple[list[str], list[str]]:
        """Return ``(pending, skipped)`` source names."""

        pending: list[str] = []
        skipped: list[str] = []
        for name in self.transport.list_files():
            if get_extension(name) not in self._extensions:
                continue
            if self.transport.exists(pdf_name(name)):
                logger.debug("PDF already exists, skipping: %s", pdf_name(name))
                skipped.append(name)
            else:
                pending.append(name)
        return pending, skipped

    def convert(self, name: str) -> str:
        """Convert ``name`` and write its PDF; return the PDF name."""

        logger.info("Processing file: %s", name)
        raw = self.transport.read_bytes(name)
        document = parse_document(
            name,
            raw.decode("utf-8-sig"),
            header=self.cfg.csv.header,
            delimiter=self.cfg.csv.delimiter,
        )
        target = pdf_name(name)
        data = render_pdf(document, self.cfg, fonts=self.fonts, title=target)
        self.transport.write_bytes(target, data)
        logger.info("PDF generated: %s", target)
        return target

    def poll_once(self) -> PollResult:
        result = PollResult()
        pending, result.skipped = self.candidates()
        if not pending:
            logger.debug("No files to convert.")
            return result

        with ThreadPoolExecutor(max_workers=self.cfg.watch.max_workers) as pool:
            futures = {name: pool.submit(self.convert, name) for name in pending}
        for name, future in futures.items():
            exc = future.exception()
            if exc is None:
                result.converted.append(name)
            else:
                logger.error("Conversion failed for %s: %s", name, exc, exc_info=exc)
                result.failed[name] = str(exc)
        return result

    def run(self, max_polls: int | None = None) -> None:
        """Poll forever, or ``max_polls`` times, sleeping between polls."""

        polls = 0
        while max_polls is None or polls < max_polls:
            try:
                self.poll_once()
            except OSError as exc:
                logger.error("Error listing files: %s", exc)
            polls += 1
            if max_polls is None or polls < max_polls:
                self._sleep(self.cfg.watch.poll_interval_seconds)


__all__ = ["DirectoryWatcher", "PollResult", "pdf_name"]
