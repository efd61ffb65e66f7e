"""Reading estimate documents into the validated estimate model.

An estimate can fail to load because the file is missing or unreadable, the
JSON is malformed, or the document breaks the schema. All of these surface
as ``ConfigError``; its ``error_type`` tells the CLI and API which one.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from paintquote.application.config.schema import EstimateConfiguration

_VALUE_ERROR_PREFIX = "Value error, "


class ConfigError(Exception):
    """An estimate document that could not be loaded.

    ``details`` holds one dict per problem. Schema problems carry ``path``,
    ``message``, ``value`` and ``error_type``; JSON problems carry ``line``,
    ``column`` and ``message``.
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

    def problem_lines(self) -> list[str]:
        """Human-readable lines naming each problem with the estimate."""
        if self.error_type == "file_not_found":
            return [f"File not found: {self.path}"]
        if self.error_type == "json_parse":
            return ["Invalid JSON syntax"] + [
                f"  Line {d.get('line', '?')}, Column {d.get('column', '?')}: "
                f"{d.get('message', 'unreadable')}"
                for d in self.details
            ]
        if self.error_type == "validation":
            lines = []
            for problem in self.details:
                lines.append(f"{problem.get('path') or 'estimate'}: {problem['message']}")
                value = problem.get("value")
                if value is not None and not isinstance(value, (dict, list)):
                    lines.append(f"  Got: {value!r}")
            return lines
        return [self.message]


def _field_path(loc: tuple[str | int, ...]) -> str:
    """Dotted path of an estimate field.

    Examples:
        >>> _field_path(("rooms", 0, "length"))
        'rooms[0].length'
        >>> _field_path(("area_configs", 1))
        'area_configs[1]'
    """
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else str(part)
    return path


def _schema_problems(error: PydanticValidationError) -> list[dict[str, Any]]:
    problems = []
    for err in error.errors():
        message = err["msg"]
        if message.startswith(_VALUE_ERROR_PREFIX):
            message = message[len(_VALUE_ERROR_PREFIX):]
        problems.append(
            {
                "path": _field_path(err["loc"]),
                "message": message,
                "value": err.get("input"),
                "error_type": err["type"],
            }
        )
    return problems


def _validate_estimate(data: Any, path: Path | None = None) -> EstimateConfiguration:
    try:
        return EstimateConfiguration.model_validate(data)
    except PydanticValidationError as e:
        problems = _schema_problems(e)
        summary = [f"Estimate validation failed ({len(problems)} problem(s)):"]
        summary.extend(f"  - {p['path'] or 'estimate'}: {p['message']}" for p in problems)
        raise ConfigError(
            message="\n".join(summary),
            error_type="validation",
            path=path,
            details=problems,
        ) from e


def _read_estimate_json(path: Path) -> Any:
    if not path.exists():
        raise ConfigError(
            message=f"Estimate file not found: {path}",
            error_type="file_not_found",
            path=path,
        )
    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise ConfigError(
            message=f"No permission to read estimate file: {path}",
            error_type="permission_denied",
            path=path,
        ) from e
    except OSError as e:
        raise ConfigError(
            message=f"Could not read estimate file {path}: {e}",
            error_type="file_read_error",
            path=path,
        ) from e

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=(
                f"Invalid JSON in estimate file {path} at line {e.lineno}, "
                f"column {e.colno}: {e.msg}"
            ),
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e


def load_config(path: Path) -> EstimateConfiguration:
    """Load and validate an estimate file.

    Raises:
        ConfigError: If the file cannot be read, parsed or validated. The
            ``error_type`` is one of ``file_not_found``,
            ``permission_denied``, ``file_read_error``, ``json_parse`` or
            ``validation``.
    """
    return _validate_estimate(_read_estimate_json(path), path)


def load_config_from_dict(data: dict[str, Any]) -> EstimateConfiguration:
    """Validate an estimate held in a dictionary (e.g. an API request body).

    Raises:
        ConfigError: If the data fails validation.
    """
    return _validate_estimate(data)
