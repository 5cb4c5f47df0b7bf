"""Parser for claim listings.

Each line describes one claim::

    #123 @ 3,2: 5x4

meaning claim 123 covers a 5 wide, 4 tall rectangle whose top left corner is 3 cells
from the left edge and 2 cells from the top edge. Whitespace around tokens is ignored.
"""

import logging

from slicey.claim import Claim
from slicey.rectangle import Rectangle
from slicey.slicey_error import ParseError

_LOGGER = logging.getLogger(__name__)

# Fields are 32 bit unsigned integers
MAX_UINT = 2**32 - 1


def _split(text: str, delimiter: str) -> tuple[str, str]:
    index = text.find(delimiter)
    if index < 0:
        raise ParseError(f"{delimiter} not found")
    return text[:index], text[index + 1 :]


def _parse_uint(text: str, field: str) -> int:
    value = text.strip()
    if not value:
        raise ParseError(f"{field} not found")
    if not (value.isascii() and value.isdigit()):
        raise ParseError(f"invalid {field}: {value!r}")
    result = int(value)
    if result > MAX_UINT:
        raise ParseError(f"{field} out of range: {value}")
    return result


def parse_line(line: str) -> Claim:
    """Parse a single claim line

    Args:
        line: Text in the form '#<id> @ <left>,<top>: <width>x<height>'

    Returns:
        Claim: The parsed claim

    Raises:
        ParseError: If a delimiter is missing or a field is not an unsigned integer
    """
    id_part, rect_part = _split(line.strip(), "@")
    claim_id = _parse_uint(id_part.strip()[1:], "id")

    position, size = _split(rect_part, ":")
    left, top = _split(position.strip(), ",")
    width, height = _split(size.strip(), "x")

    return Claim(
        id=claim_id,
        rect=Rectangle(
            left=_parse_uint(left, "left"),
            top=_parse_uint(top, "top"),
            width=_parse_uint(width, "width"),
            height=_parse_uint(height, "height"),
        ),
    )


def parse(text: str) -> list[Claim]:
    """Parse every claim in the text, in line order.

    Lines end with a newline, optionally preceded by a carriage return, and a single
    trailing newline is allowed. Every other line, blank ones included, must be a claim.
    Parsing is all or nothing: the first malformed line raises and no claims are returned.

    Raises:
        ParseError: For the first malformed line, with its 1-based line number
    """
    claims = []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    for line_number, line in enumerate(lines, start=1):
        line = line.removesuffix("\r")
        try:
            claims.append(parse_line(line))
        except ParseError as e:
            raise ParseError(e.reason, line=line, line_number=line_number) from e
    _LOGGER.debug(f"Parsed {len(claims)} claims")
    return claims
