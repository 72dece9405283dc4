"""Reading front matter from files."""

import os
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Callable, Optional, Union

from front_matter_extractor.matter import MatterResult, extract_with_options
from front_matter_extractor.options import MatterOptions
from front_matter_extractor.parsers import ParserRegistry
from front_matter_extractor.utils.logging import get_logger

logger = get_logger(__name__)

PathLike = Union[str, "os.PathLike[str]"]
ReadCallback = Callable[[Optional[BaseException], Optional[MatterResult]], None]

# Shared executor for read_file_async, created on first use
_executor: Optional[ThreadPoolExecutor] = None


def _get_executor() -> ThreadPoolExecutor:
    global _executor

    if _executor is None:
        _executor = ThreadPoolExecutor(thread_name_prefix="front-matter-reader")
    return _executor


def _read(path: PathLike, options: MatterOptions, registry: Optional[ParserRegistry]) -> MatterResult:
    logger.debug(f"Reading front matter from {path}")
    with open(path, "r", encoding="utf-8", newline="") as f:
        content = f.read()

    result = extract_with_options(content, options, registry)
    result.path = os.path.realpath(path)
    return result


def read_file(
    path: PathLike,
    *,
    registry: Optional[ParserRegistry] = None,
    **options,
) -> MatterResult:
    """Read a UTF-8 file and extract its front matter.

    Args:
        path: Path to the file
        registry: Parser registry (the default registry if None)
        **options: Extraction options (loose, lang, delims, parsers)

    Returns:
        Extraction result with ``path`` set to the canonical file path

    Raises:
        OSError: If the file cannot be read
    """
    return _read(path, MatterOptions.build(**options), registry)


def read_file_async(
    path: PathLike,
    callback: Optional[ReadCallback] = None,
    *,
    executor: Optional[Executor] = None,
    registry: Optional[ParserRegistry] = None,
    **options,
) -> "Future[MatterResult]":
    """Read a file and extract its front matter in the background.

    Options are validated before the read is scheduled, so a ConfigError is
    raised to the caller directly. Read and parse failures are delivered
    through the future and, if given, ``callback(error, None)``; on success
    the callback receives ``(None, result)``.

    Args:
        path: Path to the file
        callback: Function called with (error, result) when done
        executor: Executor to run the read on (a shared thread pool if None)
        registry: Parser registry (the default registry if None)
        **options: Extraction options (loose, lang, delims, parsers)

    Returns:
        Future resolving to the extraction result
    """
    matter_options = MatterOptions.build(**options)
    if executor is None:
        executor = _get_executor()

    future = executor.submit(_read, path, matter_options, registry)

    if callback is not None:

        def _done(done: "Future[MatterResult]") -> None:
            error = done.exception()
            if error is not None:
                callback(error, None)
            else:
                callback(None, done.result())

        future.add_done_callback(_done)

    return future
