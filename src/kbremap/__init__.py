"""kbremap -- Keyboard remapping for macOS via hidutil.

This package turns human-friendly key remapping requests (``--map`` and
``--swap`` with key names, characters or raw USB HID usage IDs) into the
``hidutil property`` request that applies them to attached keyboards.
"""

__version__ = "0.1.0"
