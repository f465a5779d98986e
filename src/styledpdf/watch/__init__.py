"""Directory polling and file transports."""

from .transport import FileTransport, LocalDirectoryTransport
from .watcher import DirectoryWatcher, PollResult, pdf_name

__all__ = ["FileTransport", "LocalDirectoryTransport", "DirectoryWatcher", "PollResult", "pdf_name"]
