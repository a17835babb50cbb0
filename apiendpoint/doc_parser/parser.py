"""
Annotation parser.

Turns the free-text documentation of a verb method into a structured mapping.
Lines starting with the tag marker (``@api`` by default) open a tag, e.g.::

    @apiUri /blog/12
    @apiDescription Retrieve the blogs information like
                    id, name and description
    @apiResponse id int Blog ID
    @apiResponse name string The name of the blog

Indented plain lines continue the tag above them. Blank lines, foreign tags
(``@param``) and comment delimiters end the current tag.
"""

import logging
import re
from enum import Enum
from typing import Iterator, NamedTuple, Optional

from apiendpoint.config import DEFAULT_ANNOTATION_MARKER
from apiendpoint.doc_parser.accumulator import accumulate
from apiendpoint.doc_parser.models import ParsedDocumentation

logger = logging.getLogger(__name__)

_NEWLINE_RE = re.compile(r"\r\n|\r|\n")
# Comment gutter: a run of asterisks not glued to the text after or before it
_LEADING_STARS_RE = re.compile(r"^\*+(?=[\s/]|$)")
_TRAILING_STARS_RE = re.compile(r"(?:^|(?<=\s))\*+$")


class LineKind(Enum):
    """Classification of a single documentation line."""
    TAG_START = "tag_start"
    CONTINUATION = "continuation"
    IGNORABLE = "ignorable"
    DETACHED = "detached"  # plain text with no tag to attach to


class ClassifiedLine(NamedTuple):
    kind: LineKind
    key: str = ""
    long_key: str = ""
    value: str = ""


def lower_first(text: str) -> str:
    """Lower-case the first character of a string."""
    return text[:1].lower() + text[1:]


def clean_line(line: str) -> str:
    """Strip whitespace and comment decoration from a documentation line."""
    line = _LEADING_STARS_RE.sub("", line.strip())
    return _TRAILING_STARS_RE.sub("", line).strip()


class AnnotationParser:
    """
    Parse annotation tags out of documentation text.
    """

    def __init__(self, marker: str = DEFAULT_ANNOTATION_MARKER):
        """
        Initialize the parser.

        Args:
            marker: Literal prefix identifying a documentation tag
        """
        if not marker:
            raise ValueError("marker must not be empty")
        self.marker = marker
        self._tag_re = re.compile(re.escape(marker) + r"[A-Za-z]*")

    def split_lines(self, raw_comment: Optional[str]) -> Iterator[str]:
        """Split raw documentation into cleaned lines."""
        if not raw_comment:
            return
        for line in _NEWLINE_RE.split(raw_comment):
            yield clean_line(line)

    def classify(self, line: str, active_long_key: Optional[str] = None) -> ClassifiedLine:
        """
        Classify a cleaned line.

        Args:
            line: Line with decoration already stripped
            active_long_key: Tag token of the tag currently open, if any

        Returns:
            ClassifiedLine describing what the line contributes
        """
        if line.startswith(self.marker):
            long_key = self._tag_re.match(line).group(0)
            tag_name = long_key[len(self.marker):]
            if not tag_name:
                # A bare marker names no tag
                return ClassifiedLine(LineKind.IGNORABLE)
            return ClassifiedLine(LineKind.TAG_START, lower_first(tag_name), long_key, line)

        if not line or line[0] in ("@", "/"):
            return ClassifiedLine(LineKind.IGNORABLE)

        if not active_long_key:
            return ClassifiedLine(LineKind.DETACHED)

        key = lower_first(active_long_key[len(self.marker):])
        return ClassifiedLine(LineKind.CONTINUATION, key, active_long_key, line)

    def parse(self, raw_comment: Optional[str]) -> ParsedDocumentation:
        """
        Parse documentation text into a tag mapping.

        Args:
            raw_comment: Docstring or comment block, may be empty

        Returns:
            Mapping of tag key to a value or a list of values
        """
        output: ParsedDocumentation = {}
        active_long_key: Optional[str] = None

        for line in self.split_lines(raw_comment):
            classified = self.classify(line, active_long_key)

            if classified.kind is LineKind.IGNORABLE:
                active_long_key = None
                continue
            if classified.kind is LineKind.DETACHED:
                continue
            if classified.kind is LineKind.TAG_START:
                active_long_key = classified.long_key

            output = accumulate(output, classified.key, classified.value, classified.long_key)

        if output:
            logger.debug(f"Parsed documentation tags: {', '.join(output)}")

        return output


def parse_doc(raw_comment: Optional[str], marker: str = DEFAULT_ANNOTATION_MARKER) -> ParsedDocumentation:
    """Parse documentation text with a one-off parser."""
    return AnnotationParser(marker).parse(raw_comment)
