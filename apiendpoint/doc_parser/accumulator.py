"""
Merge annotation lines into a documentation mapping.

A tag seen for the first time is stored as a single string. When the same tag
shows up again as a fresh tag line the value is promoted to a list; lines that
merely continue a tag are joined onto the value they continue. Whether a line
is fresh or a continuation is decided by the presence of the tag token at the
start of the line.
"""

import re
from typing import List, Tuple

from apiendpoint.doc_parser.models import ParsedDocumentation


def strip_tag(long_key: str, value: str) -> Tuple[str, bool]:
    """
    Remove a leading tag token from an annotation line.

    Args:
        long_key: Full tag token, e.g. "@apiResponse"
        value: Annotation line

    Returns:
        Tuple of (the trimmed line without the token, whether the token was removed)
    """
    value = value.strip()
    if not long_key:
        return value, False

    match = re.match(re.escape(long_key) + r"\s+", value)
    if match is None:
        return value, False

    return value[match.end():].strip(), True


def _join(current: str, addition: str) -> str:
    if not current:
        return addition
    if not addition:
        return current
    return f"{current} {addition}"


def merge_multiple_values(output: ParsedDocumentation, key: str, value: str, long_key: str) -> ParsedDocumentation:
    """
    Merge a line into a tag that already holds several values.

    A fresh tag line becomes a new element, a continuation is appended to the
    last element.
    """
    new_value, fresh = strip_tag(long_key, value)
    values: List[str] = list(output[key])

    if fresh or not values:
        values.append(new_value)
    else:
        values[-1] = _join(values[-1], new_value)

    merged = dict(output)
    merged[key] = values
    return merged


def merge_single_value(output: ParsedDocumentation, key: str, value: str, long_key: str) -> ParsedDocumentation:
    """
    Merge a line into a tag that holds a single value.

    A fresh tag line promotes the value to a two element list, a continuation
    is appended to the existing value.
    """
    old_value = output[key]
    new_value, fresh = strip_tag(long_key, value)

    merged = dict(output)
    if fresh:
        merged[key] = [old_value, new_value]
    else:
        merged[key] = _join(old_value, new_value)
    return merged


def accumulate(output: ParsedDocumentation, key: str, value: str, long_key: str) -> ParsedDocumentation:
    """
    Merge one annotation line into the documentation mapping.

    Args:
        output: Documentation collected so far (left untouched)
        key: Tag key, e.g. "response"
        value: The annotation line
        long_key: Full tag token of the active tag, e.g. "@apiResponse"

    Returns:
        A new documentation mapping
    """
    if key in output:
        if isinstance(output[key], list):
            return merge_multiple_values(output, key, value, long_key)
        return merge_single_value(output, key, value, long_key)

    # Nothing to attach a line to without an active tag
    if not long_key:
        return output

    new_value, _ = strip_tag(long_key, value)
    merged = dict(output)
    merged[key] = new_value
    return merged
