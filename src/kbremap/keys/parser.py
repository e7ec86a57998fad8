"""Parse user-supplied key tokens into key specs.

A token is resolved by the first rule that applies:

1. a known key name, alias or group (case-insensitive);
2. a single character, looked up on the US layout;
3. an unsigned decimal (``29``) or hex (``0x1d``) number, taken as the
   usage ID verbatim;
4. otherwise the token is invalid.

A single digit is therefore the digit key, and a numeric token is never
looked up in the key table.
"""

from __future__ import annotations

import logging
import re

from kbremap.domain.errors import InvalidKeyError
from kbremap.domain.models import KeyKind, KeySpec
from kbremap.keys import table

logger = logging.getLogger(__name__)

MAX_USAGE: int = 0xFFFF_FFFF_FFFF_FFFF

_NUMBER_RE = re.compile(r"(?:0[xX](?P<hex>[0-9a-fA-F]+)|(?P<dec>[0-9]+))")


def parse_key(token: str) -> KeySpec:
    """Resolve a single colon-free token into a KeySpec.

    Raises:
        InvalidKeyError: If the token matches none of the rules.
    """
    if table.is_name(token):
        spec = KeySpec(token=token, kind=KeyKind.NAME, usages=table.resolve_name(token))
    elif len(token) == 1:
        try:
            usage = table.resolve_char(token)
        except KeyError as e:
            raise InvalidKeyError(token, "no key types this character on a US layout") from e
        spec = KeySpec(token=token, kind=KeyKind.CHARACTER, usages=(usage,))
    else:
        spec = KeySpec(token=token, kind=KeyKind.NUMBER, usages=(parse_number(token),))
    logger.debug("Parsed key %r as %s %s", token, spec.kind.value, spec.usages)
    return spec


def parse_number(token: str) -> int:
    """Parse a decimal or ``0x``-prefixed hexadecimal usage ID.

    Raises:
        InvalidKeyError: If the token is not a number or exceeds 64 bits.
    """
    match = _NUMBER_RE.fullmatch(token)
    if match is None:
        if not token:
            raise InvalidKeyError(token, "empty key")
        raise InvalidKeyError(token, "not a key name, character or usage ID")
    if match.group("hex") is not None:
        value = int(match.group("hex"), 16)
    else:
        value = int(match.group("dec"), 10)
    if value > MAX_USAGE:
        raise InvalidKeyError(token, "usage ID does not fit in 64 bits")
    return value
