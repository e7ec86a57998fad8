"""Key table and key token parsing.

Public API:
    parse_key -- Resolve a token into a KeySpec
    display_name -- Render a usage ID for humans
    extended_usage -- Qualify a usage ID with the keyboard usage page
"""

from kbremap.keys.parser import parse_key
from kbremap.keys.table import display_name, extended_usage

__all__ = ["display_name", "extended_usage", "parse_key"]
