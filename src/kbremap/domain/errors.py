"""Exception hierarchy for kbremap.

Every failure that aborts an invocation derives from KbRemapError so the
CLI can report it with a single message and a non-zero exit code.
"""

from __future__ import annotations


class KbRemapError(Exception):
    """Base class for all kbremap errors."""


class InvalidKeyError(KbRemapError, ValueError):
    """Raised when a token cannot be resolved to a key."""

    def __init__(self, token: str, reason: str = "") -> None:
        message = f"invalid key `{token}`"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.token = token
        self.reason = reason


class AmbiguousMappingError(KbRemapError):
    """Raised when a key group is used where a single key is required."""

    def __init__(self, argument: str, token: str) -> None:
        super().__init__(
            f"ambiguous mapping `{argument}`: `{token}` names more than one key, "
            "use the left/right variants explicitly"
        )
        self.argument = argument
        self.token = token


class ConflictingMappingError(KbRemapError):
    """Raised when one source key is mapped to two different destinations."""

    def __init__(self, source: str, first: str, second: str) -> None:
        super().__init__(
            f"conflicting mappings for {source}: mapped to both {first} and {second}"
        )
        self.source = source
        self.first = first
        self.second = second


class DeviceNotFoundError(KbRemapError):
    """Raised when no attached device matches the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"no device named {name!r} found (use --list to see available devices)"
        )
        self.name = name


class ExternalToolError(KbRemapError):
    """Raised when an external command cannot run or exits unsuccessfully."""

    def __init__(
        self,
        message: str,
        command: list[str] | None = None,
        exit_code: int | None = None,
        stdout: str = "",
        stderr: str = "",
    ) -> None:
        super().__init__(message)
        self.command = command or []
        self.exit_code = exit_code
        self.stdout = stdout
        self.stderr = stderr
