"""Typer-based command line interface.

``convert`` renders one ``.txt`` or ``.csv`` file into a PDF.  ``watch``
polls a directory and converts every new file, writing ``<name>.pdf`` next
to its source (or into ``watch.output_directory``).

Exit codes
----------
0 success
3 I/O error (unsupported extension, filesystem issues)
4 configuration error
5 render error (unexpected exception during layout or PDF output)
"""

from __future__ import annotations

import csv
import os
import sys
from pathlib import Path
from time import perf_counter
from types import TracebackType
from typing import Any, NoReturn, Optional

import typer
from pydantic import ValidationError
from yaml import YAMLError

from .config import ConfigModel, load_config
from .io import read_document
from .io.writers.pdf_writer import build_font_registry, write_pdf
from .utils.errors import ConfigurationError, UnsupportedFormatError
from .utils.logging import configure_logging
from .watch import DirectoryWatcher, LocalDirectoryTransport, pdf_name

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

app = typer.Typer(
    name="styledpdf",
    help="Convert styled text and CSV files into PDFs. "
    "Use 'styledpdf convert' for one file or 'styledpdf watch' for a directory.",
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> NoReturn:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _load(config_path: Path | None, overrides: dict[str, Any] | None = None) -> ConfigModel:
    try:
        return load_config(config_path, overrides=overrides)
    except (ValidationError, YAMLError, ValueError, OSError) as exc:
        _safe_exit(4, str(exc).splitlines()[0])


class Timing:
    """Context manager measuring elapsed milliseconds."""

    def __init__(self) -> None:
        self._start = 0.0
        self._end = 0.0

    def __enter__(self) -> "Timing":
        self._start = perf_counter()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self._end = perf_counter()

    @property
    def ms(self) -> float:
        return (self._end - self._start) * 1000.0


@app.callback()
def main() -> None:
    """Entry point for the styledpdf command group."""
    pass


@app.command()
def convert(
    in_path: Path = typer.Option(  # noqa: B008
        ..., "--in", "--input", help="Input file (.txt or .csv)"
    ),
    out_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--out", help="Output PDF; defaults to the input name with .pdf"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit progress messages to stderr"
    ),
) -> None:
    """Render ``in_path`` into a PDF."""

    configure_logging(verbose)
    cfg = _load(config_path)
    if verbose:
        typer.echo("Loaded config", err=True)

    try:
        fonts = build_font_registry(cfg)
    except ConfigurationError as exc:
        _safe_exit(4, str(exc))

    try:
        document = read_document(in_path, header=cfg.csv.header, delimiter=cfg.csv.delimiter)
    except (UnsupportedFormatError, UnicodeDecodeError, csv.Error, OSError) as exc:
        _safe_exit(3, str(exc))

    target = out_path or in_path.with_name(pdf_name(in_path.name))
    try:
        with Timing() as t_render:
            write_pdf(target, document, cfg, fonts=fonts)
    except OSError as exc:
        _safe_exit(3, str(exc))
    except ConfigurationError as exc:
        _safe_exit(4, str(exc))
    except Exception as exc:  # pragma: no cover - unexpected
        msg = str(exc)
        if verbose:
            msg = f"{type(exc).__name__}: {msg}"
        _safe_exit(5, msg)
    if verbose:
        typer.echo(f"Wrote {target} in {t_render.ms:.1f} ms", err=True)


@app.command()
def watch(
    directory: Optional[Path] = typer.Argument(  # noqa: B008
        None, help="Directory to poll; defaults to watch.directory from the config"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    interval: Optional[float] = typer.Option(  # noqa: B008
        None, "--interval", help="Seconds between polls"
    ),
    once: bool = typer.Option(  # noqa: B008
        False, "--once", help="Poll a single time and exit"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Log debug messages"
    ),
) -> None:
    """Poll a directory and convert new files into PDFs."""

    configure_logging(verbose)
    overrides: dict[str, Any] = {"watch": {}}
    if directory is not None:
        overrides["watch"]["directory"] = str(directory)
    if interval is not None:
        overrides["watch"]["poll_interval_seconds"] = interval
    cfg = _load(config_path, overrides)

    if not cfg.watch.directory.is_dir():
        _safe_exit(3, f"Not a directory: {cfg.watch.directory}")
    try:
        fonts = build_font_registry(cfg)
    except ConfigurationError as exc:
        _safe_exit(4, str(exc))

    transport = LocalDirectoryTransport(cfg.watch.directory, cfg.watch.output_directory)
    watcher = DirectoryWatcher(transport, cfg, fonts=fonts)
    if once:
        result = watcher.poll_once()
        typer.echo(
            f"converted={len(result.converted)} skipped={len(result.skipped)} "
            f"failed={len(result.failed)}",
            err=True,
        )
        if result.failed:
            _safe_exit(5, None)
        return

    try:
        watcher.run()
    except KeyboardInterrupt:  # pragma: no cover - interactive
        typer.echo("Stopped", err=True)
