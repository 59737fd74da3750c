"""Minimal ``--name value`` command-line argument parsing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from fivednine import log
from fivednine.log import LogVerbosity, LogZone


@dataclass(frozen=True)
class CommandLineArgument:
    """A named argument and the value that followed it."""

    name: str
    value: str

    def as_string(self) -> str:
        return self.value


def _is_argument_name(token: str) -> bool:
    return len(token) > 2 and token.startswith("--")


class CommandLineArgumentParser:
    """Collects ``--name value`` pairs; flags without values are reported and skipped."""

    def __init__(self, argv: Sequence[str]) -> None:
        """Parse ``argv``, which excludes the program name."""
        self._arguments: list[CommandLineArgument] = []
        tokens = list(argv)
        last_name_index: int | None = None
        for index, token in enumerate(tokens):
            follows_name = last_name_index is not None and last_name_index == index - 1
            if _is_argument_name(token):
                if follows_name:
                    log.log_line(
                        LogZone.DEFAULT,
                        LogVerbosity.ERROR,
                        "CLI argument has no value: %s",
                        tokens[last_name_index],
                    )
                elif index == len(tokens) - 1:
                    log.log_line(
                        LogZone.DEFAULT,
                        LogVerbosity.ERROR,
                        "CLI argument has no value: %s",
                        token,
                    )
                last_name_index = index
            elif follows_name:
                self._arguments.append(CommandLineArgument(tokens[index - 1][2:], token))

    def find_argument(self, name: str) -> CommandLineArgument | None:
        """Return the first argument called ``name``, or None."""
        return next((arg for arg in self._arguments if arg.name == name), None)