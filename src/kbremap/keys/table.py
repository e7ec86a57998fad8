"""USB HID usage IDs for key names and characters.

Reference: USB HID Usage Tables, Section 10 (Keyboard/Keypad Page 0x07)
and Apple TN2450 for the values hidutil accepts.

hidutil addresses a key by its usage ID qualified with the usage page
in the upper 32 bits, e.g. CapsLock (0x39) on the keyboard page is
0x700000039. Keys on the keyboard page are stored here as bare usage
IDs; the Apple ``fn`` key lives on a vendor page and is stored already
qualified.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Usage pages
# ---------------------------------------------------------------------------

USAGE_PAGE_SHIFT: int = 32
USAGE_ID_MASK: int = 0xFFFF_FFFF
KEYBOARD_USAGE_PAGE: int = 0x07 << USAGE_PAGE_SHIFT
APPLE_TOP_CASE_USAGE_PAGE: int = 0xFF << USAGE_PAGE_SHIFT

# ---------------------------------------------------------------------------
# Key name -> usage ID
# ---------------------------------------------------------------------------

NAME_CODES: dict[str, int] = {
    # Control keys
    "return": 0x28,
    "escape": 0x29,
    "delete": 0x2A,
    "tab": 0x2B,
    "space": 0x2C,
    # Lock keys
    "capslock": 0x39,
    # Function keys
    "f1": 0x3A, "f2": 0x3B, "f3": 0x3C, "f4": 0x3D,
    "f5": 0x3E, "f6": 0x3F, "f7": 0x40, "f8": 0x41,
    "f9": 0x42, "f10": 0x43, "f11": 0x44, "f12": 0x45,
    "f13": 0x68, "f14": 0x69, "f15": 0x6A, "f16": 0x6B,
    "f17": 0x6C, "f18": 0x6D, "f19": 0x6E, "f20": 0x6F,
    "f21": 0x70, "f22": 0x71, "f23": 0x72, "f24": 0x73,
    # Navigation
    "home": 0x4A,
    "pageup": 0x4B,
    "end": 0x4D,
    "pagedown": 0x4E,
    "right": 0x4F, "left": 0x50,
    "down": 0x51, "up": 0x52,
    # Modifiers
    "lcontrol": 0xE0,
    "lshift": 0xE1,
    "loption": 0xE2,
    "lcommand": 0xE3,
    "rcontrol": 0xE4,
    "rshift": 0xE5,
    "roption": 0xE6,
    "rcommand": 0xE7,
    "fn": APPLE_TOP_CASE_USAGE_PAGE | 0x03,
}

# Alternative spellings -> canonical name
NAME_ALIASES: dict[str, str] = {
    "esc": "escape",
    "enter": "return",
    "backspace": "delete",
    "del": "delete",
    "⏎": "return",
    "⌫": "delete",
    "⇪": "capslock",
}

# Names that stand for both the left and right variant of a modifier
GROUP_NAMES: dict[str, tuple[str, ...]] = {
    "control": ("lcontrol", "rcontrol"),
    "shift": ("lshift", "rshift"),
    "option": ("loption", "roption"),
    "command": ("lcommand", "rcommand"),
}

# ---------------------------------------------------------------------------
# Character -> usage ID (US layout)
# ---------------------------------------------------------------------------

CHAR_CODES: dict[str, int] = {
    # Letters (a=0x04 .. z=0x1D)
    "a": 0x04, "b": 0x05, "c": 0x06, "d": 0x07,
    "e": 0x08, "f": 0x09, "g": 0x0A, "h": 0x0B,
    "i": 0x0C, "j": 0x0D, "k": 0x0E, "l": 0x0F,
    "m": 0x10, "n": 0x11, "o": 0x12, "p": 0x13,
    "q": 0x14, "r": 0x15, "s": 0x16, "t": 0x17,
    "u": 0x18, "v": 0x19, "w": 0x1A, "x": 0x1B,
    "y": 0x1C, "z": 0x1D,
    # Numbers (1=0x1E .. 0=0x27)
    "1": 0x1E, "2": 0x1F, "3": 0x20, "4": 0x21,
    "5": 0x22, "6": 0x23, "7": 0x24, "8": 0x25,
    "9": 0x26, "0": 0x27,
    # Whitespace
    "\t": 0x2B,
    " ": 0x2C,
    # Punctuation / symbols
    "-": 0x2D, "=": 0x2E,
    "[": 0x2F, "]": 0x30,
    "\\": 0x31,
    ";": 0x33, "'": 0x34,
    "`": 0x35,
    ",": 0x36, ".": 0x37, "/": 0x38,
}

# Characters typed with Shift held -> the character on the same key
SHIFT_CHARS: dict[str, str] = {
    "!": "1", "@": "2", "#": "3", "$": "4",
    "%": "5", "^": "6", "&": "7", "*": "8",
    "(": "9", ")": "0", "_": "-", "+": "=",
    "{": "[", "}": "]", "|": "\\",
    ":": ";", '"': "'", "~": "`",
    "<": ",", ">": ".", "?": "/",
    "A": "a", "B": "b", "C": "c", "D": "d",
    "E": "e", "F": "f", "G": "g", "H": "h",
    "I": "i", "J": "j", "K": "k", "L": "l",
    "M": "m", "N": "n", "O": "o", "P": "p",
    "Q": "q", "R": "r", "S": "s", "T": "t",
    "U": "u", "V": "v", "W": "w", "X": "x",
    "Y": "y", "Z": "z",
}

# Reverse lookups for display
_NAME_BY_USAGE: dict[int, str] = {code: name for name, code in NAME_CODES.items()}
_CHAR_BY_USAGE: dict[int, str] = {code: char for char, code in CHAR_CODES.items()}


def extended_usage(usage: int) -> int:
    """Qualify a bare usage ID with the keyboard usage page.

    Values that already carry a usage page are returned unchanged.
    """
    if usage > USAGE_ID_MASK:
        return usage
    return KEYBOARD_USAGE_PAGE | usage


def is_name(token: str) -> bool:
    """Return True if ``token`` is a known key name, alias or group."""
    key = token.lower()
    return key in NAME_CODES or key in NAME_ALIASES or key in GROUP_NAMES


def resolve_name(token: str) -> tuple[int, ...]:
    """Convert a key name to its usage ID(s).

    Group names (``control``, ``shift``, ``option``, ``command``) yield
    the left and right variants, in that order.

    Raises:
        KeyError: If the name is not recognized.
    """
    key = token.lower()
    if key in GROUP_NAMES:
        return tuple(NAME_CODES[member] for member in GROUP_NAMES[key])
    key = NAME_ALIASES.get(key, key)
    if key in NAME_CODES:
        return (NAME_CODES[key],)
    raise KeyError(f"Unknown key name: {token!r}")


def resolve_char(char: str) -> int:
    """Convert a single character to the usage ID of the key that types it.

    Letters are case-insensitive and shifted symbols resolve to their
    base key, so ``A``, ``a`` and ``!``/``1`` pairs share a usage.

    Raises:
        KeyError: If the character has no key on the US layout.
    """
    base = SHIFT_CHARS.get(char, char)
    if base in CHAR_CODES:
        return CHAR_CODES[base]
    raise KeyError(f"No key for character: {char!r}")


def display_name(usage: int) -> str:
    """Render a usage for humans.

    Returns the canonical key name when there is one, otherwise
    ``Char('<c>')`` for character keys and ``Raw(<decimal>)`` for
    anything else. Keyboard page usages match with or without the page
    prefix, and are printed without it.
    """
    bare = usage
    if usage >> USAGE_PAGE_SHIFT == KEYBOARD_USAGE_PAGE >> USAGE_PAGE_SHIFT:
        bare = usage & USAGE_ID_MASK
    if usage in _NAME_BY_USAGE:
        return _NAME_BY_USAGE[usage]
    if bare in _NAME_BY_USAGE:
        return _NAME_BY_USAGE[bare]
    if bare in _CHAR_BY_USAGE:
        return f"Char({_CHAR_BY_USAGE[bare]!r})"
    return f"Raw({bare})"
