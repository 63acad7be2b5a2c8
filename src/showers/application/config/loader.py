"""Loading of design configuration files.

A design file is JSON. Reading, parsing and schema validation failures are
all reported as ConfigError so that a caller only has one exception to
handle; ``error_type`` tells them apart.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from showers.application.config.schemas import DesignConfiguration

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """A design configuration could not be loaded.

    Attributes:
        message: Human-readable summary.
        error_type: One of file_not_found, permission_denied,
            file_read_error, json_parse or validation.
        path: The file being loaded, if any.
        details: Per-problem dicts. JSON errors carry line and column;
            validation errors carry path, message, value and error_type.
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Render a pydantic error location as a JSON path.

    Examples:
        >>> _format_json_path(("chain", "anchor"))
        'chain.anchor'
        >>> _format_json_path(("chain", "panels", 0, "width_mm"))
        'chain.panels[0].width_mm'
    """
    path = ""
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
        elif path:
            path += f".{segment}"
        else:
            path = str(segment)
    return path


def _extract_validation_errors(
    error: PydanticValidationError,
) -> list[dict[str, Any]]:
    return [
        {
            "path": _format_json_path(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]


def _format_validation_error_message(details: list[dict[str, Any]]) -> str:
    lines = ["Configuration validation failed:"]
    for detail in details:
        line = f"  - {detail['path'] or '<root>'}: {detail['message']}"
        value = detail.get("value")
        # Whole-object inputs make the message unreadable
        if value is not None and not isinstance(value, (dict, list)):
            line += f" (got: {value!r})"
        lines.append(line)
    return "\n".join(lines)


def _validate(data: Any, path: Path | None = None) -> DesignConfiguration:
    try:
        return DesignConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            path=path,
            details=details,
        ) from e


def load_config(path: Path) -> DesignConfiguration:
    """Read and validate a design configuration file.

    Args:
        path: JSON file to load.

    Returns:
        The validated DesignConfiguration.

    Raises:
        ConfigError: With ``error_type`` file_not_found, permission_denied,
            file_read_error, json_parse or validation.
    """
    if not path.exists():
        raise ConfigError(
            message=f"Config file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise ConfigError(
            message=f"Permission denied reading config file: {path}",
            error_type="permission_denied",
            path=path,
        ) from e
    except OSError as e:
        raise ConfigError(
            message=f"Could not read config file {path}: {e}",
            error_type="file_read_error",
            path=path,
        ) from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=(
                f"Invalid JSON in config file {path} at line {e.lineno}, "
                f"column {e.colno}: {e.msg}"
            ),
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e

    logger.debug("Loaded design configuration from %s", path)
    return _validate(data, path)


def load_config_from_dict(data: dict[str, Any]) -> DesignConfiguration:
    """Validate an in-memory design configuration.

    Raises:
        ConfigError: If the data fails validation.
    """
    return _validate(data)
