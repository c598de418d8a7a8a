"""The filesystem exercises.

Each operation makes one or two filesystem calls and returns a result value.
Nothing here prints; rendering happens in the CLI. I/O failures are caught
as OSError and returned as failed results.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from file_exercises.messages import CLASSIFY_PROMPT
from file_exercises.protocols import FileSystem, InputSource
from file_exercises.types import (
    ClassifyResult,
    CreateFileResult,
    CreateOutcome,
    ErrorKind,
    ExistenceResult,
    PathReference,
    PermissionsResult,
    ReadResult,
    WriteResult,
)

logger = logging.getLogger(__name__)


def create_file(fs: FileSystem, target: PathReference) -> CreateFileResult:
    """Create an empty file at target unless something is already there.

    An existing file or directory is left untouched.

    Args:
        fs: Filesystem to act on.
        target: Path of the file to create.

    Returns:
        CreateFileResult describing what happened.
    """
    try:
        created = fs.create_new_file(target.path)
    except OSError as e:
        logger.exception("Could not create %s", target)
        return CreateFileResult(
            outcome=CreateOutcome.FAILED,
            target=target,
            error=ErrorKind.CREATION,
            detail=str(e),
        )

    outcome = CreateOutcome.CREATED if created else CreateOutcome.ALREADY_EXISTS
    logger.debug("create %s: %s", target, outcome.value)
    return CreateFileResult(outcome=outcome, target=target)


def check_exists(fs: FileSystem, target: PathReference) -> ExistenceResult:
    """Create target if absent, then check separately whether it exists.

    The existence query runs regardless of the creation outcome, so a file
    created by this same call is also reported as existing.
    """
    creation = create_file(fs, target)
    return ExistenceResult(creation=creation, exists=fs.exists(target.path))


def check_permissions(fs: FileSystem, target: PathReference) -> PermissionsResult:
    """Query read and write access independently.

    A missing path is reported as neither readable nor writable.
    """
    return PermissionsResult(
        target=target,
        readable=fs.can_read(target.path),
        writable=fs.can_write(target.path),
    )


def classify_path(fs: FileSystem, source: InputSource) -> ClassifyResult:
    """Ask for a name and classify it as a regular file or a directory.

    Args:
        fs: Filesystem to query.
        source: Where the name is read from.

    Returns:
        ClassifyResult with both flags False if the path does not exist.
    """
    token = source.read_token(CLASSIFY_PROMPT)
    target = PathReference(token)
    if not token:
        # An empty name would otherwise resolve to the working directory
        return ClassifyResult(target=target, is_file=False, is_directory=False)

    return ClassifyResult(
        target=target,
        is_file=fs.is_file(target.path),
        is_directory=fs.is_dir(target.path),
    )


def write_line(
    fs: FileSystem, target: PathReference, text: str, encoding: str = "utf-8"
) -> WriteResult:
    """Write text to target, replacing whatever was there.

    No newline is added beyond what text contains.
    """
    try:
        fs.write_text(target.path, text, encoding=encoding)
    except (OSError, UnicodeError) as e:
        logger.exception("Could not write %s", target)
        return WriteResult(success=False, target=target, error=ErrorKind.WRITE, detail=str(e))
    return WriteResult(success=True, target=target)


def read_lines(
    fs: FileSystem,
    target: PathReference,
    on_line: Callable[[str], None],
    encoding: str = "utf-8",
) -> ReadResult:
    """Read target line by line, handing each line to on_line as it is read.

    Lines already handed over stay delivered if the read fails partway.

    Args:
        fs: Filesystem to read from.
        target: File to read.
        on_line: Called once per line, in order.
        encoding: Text encoding of the file.

    Returns:
        ReadResult with the number of lines delivered.
    """
    count = 0
    try:
        for line in fs.iter_lines(target.path, encoding=encoding):
            on_line(line)
            count += 1
    except (OSError, UnicodeDecodeError) as e:
        logger.exception("Could not read %s", target)
        return ReadResult(
            success=False,
            target=target,
            line_count=count,
            error=ErrorKind.READ,
            detail=str(e),
        )
    return ReadResult(success=True, target=target, line_count=count)
