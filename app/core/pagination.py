import base64
import binascii

from app.core.errors import InvalidCursorEncodingError, InvalidCursorFormatError

CURSOR_TAG = "next cursor"
CURSOR_SEPARATOR = ":"


def encode_cursor(offset: int) -> str:
    if offset < 0:
        raise ValueError(f"cursor offset must be non-negative, got {offset}")
    payload = f"{CURSOR_TAG}{CURSOR_SEPARATOR}{offset}"
    return base64.b64encode(payload.encode("utf-8")).decode("ascii")


def decode_cursor(cursor: str | None) -> int:
    """Turn a cursor back into the offset it was issued for.

    An empty cursor is the start of the sequence. Anything that is not valid
    standard base64 raises ``InvalidCursorEncodingError``; a payload that is not
    ``next cursor:<digits>`` raises ``InvalidCursorFormatError``.
    """
    if not cursor:
        return 0
    try:
        decoded = base64.b64decode(cursor, validate=True).decode("utf-8")
    except (binascii.Error, ValueError) as exc:
        raise InvalidCursorEncodingError("cursor is not valid base64", {"cursor": cursor}) from exc

    tag, separator, value = decoded.partition(CURSOR_SEPARATOR)
    if not separator:
        raise InvalidCursorFormatError("invalid cursor format", {"cursor": cursor})
    if tag != CURSOR_TAG:
        raise InvalidCursorFormatError("invalid cursor format", {"cursor": cursor, "tag": tag})
    if not (value.isascii() and value.isdigit()):
        raise InvalidCursorFormatError("cursor offset is not a non-negative integer", {"cursor": cursor})
    try:
        return int(value)
    except ValueError as exc:
        # int() refuses digit strings past sys.get_int_max_str_digits()
        raise InvalidCursorFormatError("cursor offset is not a non-negative integer", {"cursor": cursor}) from exc


def end_offset(start: int, limit: int, total: int) -> int:
    return min(start + limit, total)


def next_cursor(end: int, total: int) -> str:
    # empty string marks the last page
    if end >= total:
        return ""
    return encode_cursor(end)
