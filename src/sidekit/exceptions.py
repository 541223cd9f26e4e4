"""Exceptions raised by the sidekit resolution and generation pipeline.

Every failure the pipeline surfaces to its caller is one of the classes below.
Each carries the structured fields needed to present it (ids, paths, reasons),
and the message is derived from those fields.
"""

from collections.abc import Mapping
from pathlib import Path

from pydantic import ValidationError


class SidekitError(Exception):
    """Base class for all sidekit failures."""


class FileError(SidekitError):
    """Raised when reading, writing or creating a path fails."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"File error ({_display_path(path)}): {reason}")


class InvalidSchemaError(SidekitError):
    """Raised when a parsed document does not match its expected structure.

    Attributes:
        source: Path or identifier of the offending document
        details: Human readable, field-level description of the violations
    """

    def __init__(self, source: str, details: str) -> None:
        self.source = source
        self.details = details
        super().__init__(f"Invalid schema ({source}):\n{details}")

    @classmethod
    def from_validation_error(cls, source: str, error: ValidationError) -> "InvalidSchemaError":
        """Build from a pydantic ValidationError, one line per violated field."""
        return cls(source, format_validation_error(error))


class KitNotFoundError(SidekitError):
    """Raised when no source can provide the requested kit."""

    def __init__(self, kit_id: str, reason: str) -> None:
        self.kit_id = kit_id
        self.reason = reason
        super().__init__(f"Kit '{kit_id}' not found: {reason}")


class RuleNotFoundError(SidekitError):
    """Raised when a rule reference cannot be resolved."""

    def __init__(self, rule_id: str, reason: str) -> None:
        self.rule_id = rule_id
        self.reason = reason
        super().__init__(f"Rule '{rule_id}' not found: {reason}")


class PresetNotFoundError(SidekitError):
    """Raised when a kit does not provide the requested preset."""

    def __init__(self, preset_id: str, reason: str) -> None:
        self.preset_id = preset_id
        self.reason = reason
        super().__init__(f"Preset '{preset_id}' not found: {reason}")


class FetchError(SidekitError):
    """Raised when the remote registry answers with an unexpected status.

    status_code is None when the request never produced a response
    (connection refused, DNS failure, ...).
    """

    def __init__(self, url: str, status_code: int | None, reason: str) -> None:
        self.url = url
        self.status_code = status_code
        self.reason = reason
        status = f"HTTP {status_code}" if status_code is not None else "no response"
        super().__init__(f"Fetch error ({url}): {status}: {reason}")


class GenerationError(SidekitError):
    """Raised when one or more agents failed to generate their files.

    Agents that succeeded have already written their output; nothing is
    rolled back.
    """

    def __init__(self, failures: Mapping[str, Exception]) -> None:
        self.failures = dict(failures)
        lines = [f"  {agent}: {error}" for agent, error in self.failures.items()]
        names = ", ".join(self.failures)
        super().__init__(f"Generation failed for {names}:\n" + "\n".join(lines))


def format_validation_error(error: ValidationError) -> str:
    """Render a pydantic ValidationError as `<dotted.path>: <message>` lines."""
    lines = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "<root>"
        lines.append(f"  {location}: {item['msg']}")
    return "\n".join(lines)


def _display_path(path: Path) -> str:
    # Relative to cwd when possible, for shorter messages
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)
