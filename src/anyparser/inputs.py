"""
Input ingestion: resolves crawl URLs or validates, test-opens and reads local
files, then attaches the result to the resolved options.
"""

import builtins
import errno
import os
from pathlib import Path
from typing import BinaryIO, List, Optional, Sequence

from .config import DefaultOptions, get_logger
from .exceptions import FileLockedError, FileNotFoundError
from .models import FileInput
from .options import AnyparserOption, ParsedOption, build_options
from .validators import CrawlUrlValidator, PathsOrUrl, PathValidator

logger = get_logger("inputs")

BUSY_ERRNOS = frozenset(
    code for code in (errno.EBUSY, getattr(errno, "ETXTBSY", None)) if code is not None
)
# ERROR_SHARING_VIOLATION, ERROR_LOCK_VIOLATION
WINDOWS_LOCK_ERRORS = frozenset({32, 33})


class LocalFileSystem:
    """Filesystem primitives used by the file validator."""

    def exists(self, path: str) -> None:
        """Raise when ``path`` is missing or cannot be inspected."""
        os.stat(path)

    def open_for_read(self, path: str) -> BinaryIO:
        return open(path, "rb")

    def read_all(self, path: str) -> bytes:
        return Path(path).read_bytes()


def is_not_found_error(error: BaseException) -> bool:
    return isinstance(error, builtins.FileNotFoundError) or (
        getattr(error, "errno", None) == errno.ENOENT
    )


def is_locked_error(error: BaseException) -> bool:
    return (
        getattr(error, "errno", None) in BUSY_ERRNOS
        or getattr(error, "winerror", None) in WINDOWS_LOCK_ERRORS
    )


def check_file_access(path: str, fs: LocalFileSystem) -> None:
    """Check that ``path`` exists and is not locked by another process."""
    try:
        fs.exists(path)
    except OSError as e:
        if is_not_found_error(e):
            raise FileNotFoundError(
                f"File {path} was not found or was removed", {"path": path}
            ) from e
        raise

    try:
        with fs.open_for_read(path):
            pass
    except OSError as e:
        if is_locked_error(e):
            raise FileLockedError(
                f"File {path} is locked by another process", {"path": path}
            ) from e
        raise


def read_files(paths: Sequence[str], fs: Optional[LocalFileSystem] = None) -> List[FileInput]:
    """Validate and read files in order, stopping at the first bad one."""
    fs = fs or LocalFileSystem()
    processed = []

    for path in paths:
        check_file_access(path, fs)
        contents = fs.read_all(path)
        logger.debug("Read %s (%d bytes)", path, len(contents))
        processed.append(FileInput(file_name=os.path.basename(path), contents=contents))

    return processed


def validate_and_parse(
    inputs: PathsOrUrl,
    options: Optional[AnyparserOption],
    defaults: DefaultOptions,
    fs: Optional[LocalFileSystem] = None,
) -> ParsedOption:
    """Resolve options and attach the validated crawl URL or file contents."""
    parsed = build_options(options, defaults)

    if parsed.model == "crawler":
        url = CrawlUrlValidator.validate(inputs)
        logger.debug("Crawling from %s", url)
        return parsed.model_copy(update={"url": url})

    paths = PathValidator.validate_paths(inputs)
    files = read_files(paths, fs)
    return parsed.model_copy(update={"files": tuple(files)})
