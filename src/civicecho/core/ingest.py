"""CSV ingestion for uploaded comment files."""

import csv
import logging
import re
from typing import List, Optional, Union

from .constants import FileConstants
from .exceptions import InvalidCSVError
from .models import Comment

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_LINE_BREAK = re.compile(r"\r?\n")


def _split_row(line: str) -> List[str]:
    """Split one data line into fields.

    Quoted fields are honoured when the line is well-formed CSV; anything the
    strict reader rejects falls back to a plain comma split.
    """
    try:
        return next(csv.reader([line], strict=True), [])
    except csv.Error:
        return line.split(",")


def _parse_id(raw: str) -> Optional[int]:
    match = _LEADING_INT.match(raw)
    return int(match.group(1)) if match else None


def parse_csv(raw_text: str) -> List[Comment]:
    """Parse `id,comment` rows into comments, skipping malformed rows.

    The first line is a header and is ignored. Comment text may contain
    unquoted commas; every field after the id is joined back together.
    """
    lines = _LINE_BREAK.split(raw_text.strip())
    comments: List[Comment] = []
    skipped = 0

    for index, line in enumerate(lines[1:], start=1):
        values = _split_row(line)
        if len(values) < 2:
            skipped += 1
            logger.debug(f"Skipping line {index}: expected at least 2 fields, got {len(values)}")
            continue

        comment_id = _parse_id(values[0])
        if comment_id is None:
            comment_id = index
        comments.append(Comment(id=comment_id, text=",".join(values[1:]).strip()))

    logger.info(f"Parsed {len(comments)} comments ({skipped} malformed rows skipped)")
    return comments


def ingest(raw_text: str) -> List[Comment]:
    """Parse an upload, failing when it yields no comments at all."""
    comments = parse_csv(raw_text)
    if not comments:
        raise InvalidCSVError()
    return comments


def decode_upload(data: Union[bytes, str]) -> str:
    """Decode uploaded file contents as UTF-8 text."""
    if isinstance(data, str):
        return data
    try:
        return data.decode(FileConstants.CSV_ENCODING)
    except UnicodeDecodeError as e:
        raise InvalidCSVError(f"File is not valid UTF-8 text: {e}") from e
