"""Run hidutil and surface its exit status.

Calls are synchronous with no timeout or retry: a hung hidutil hangs
the invocation.
"""

from __future__ import annotations

import logging
import shlex
import subprocess

from kbremap.domain.errors import ExternalToolError
from kbremap.hidutil.base import ProcessRunner
from kbremap.hidutil.encoder import DEFAULT_EXECUTABLE, EncodedRequest, to_argv

logger = logging.getLogger(__name__)


def run_tool(argv: list[str]) -> str:
    """Run ``argv`` and return its standard output.

    Raises:
        ExternalToolError: If the command cannot be executed or exits
            with a non-zero status.
    """
    command = shlex.join(argv)
    logger.debug("Running: %s", command)
    try:
        result = subprocess.run(argv, capture_output=True, text=True, check=False)
    except OSError as e:
        raise ExternalToolError(
            f"could not execute `{command}`: {e}", command=argv
        ) from e
    if result.returncode != 0:
        raise ExternalToolError(
            _format_failure(command, result.returncode, result.stdout, result.stderr),
            command=argv,
            exit_code=result.returncode,
            stdout=result.stdout,
            stderr=result.stderr,
        )
    return result.stdout


def _format_failure(command: str, exit_code: int, stdout: str, stderr: str) -> str:
    message = f"`{command}` exited with status {exit_code}"
    if stdout.strip():
        message += f"\n--- stdout\n{stdout.rstrip()}"
    if stderr.strip():
        message += f"\n--- stderr\n{stderr.rstrip()}"
    return message


class HidutilRunner(ProcessRunner):
    """Applies requests with ``hidutil property``."""

    def __init__(self, executable: str = DEFAULT_EXECUTABLE) -> None:
        self._executable = executable

    def apply(self, request: EncodedRequest) -> None:
        run_tool(to_argv(request, self._executable))
        logger.info("Applied key mapping: %s", request.payload)
