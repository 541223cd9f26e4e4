"""Schema-checked JSON document I/O."""

import json
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from sidekit.exceptions import InvalidSchemaError
from sidekit.io.files import read_file, write_file

ModelT = TypeVar("ModelT", bound=BaseModel)


def parse_json_document(text: str, model: type[ModelT], source: str) -> ModelT:
    """Parse JSON text and validate it against a model.

    Raises:
        InvalidSchemaError: If the text is not JSON or does not match the model
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidSchemaError(source, f"  <root>: invalid JSON: {e}") from e

    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise InvalidSchemaError.from_validation_error(source, e) from e


def read_json_document(path: Path, model: type[ModelT]) -> ModelT:
    """Read and validate a JSON file.

    Raises:
        FileError: If the file cannot be read
        InvalidSchemaError: If the content does not match the model
    """
    return parse_json_document(read_file(path), model, str(path))


def read_json_object(path: Path) -> dict[str, Any]:
    """Read a JSON file that must contain an object, or {} if it doesn't exist."""
    if not path.exists():
        return {}
    text = read_file(path)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidSchemaError(str(path), f"  <root>: invalid JSON: {e}") from e
    if not isinstance(data, dict):
        raise InvalidSchemaError(str(path), "  <root>: expected a JSON object")
    return data


def dump_json_document(data: dict[str, Any]) -> str:
    """Serialize with two-space indentation and a trailing newline."""
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def write_json_document(path: Path, data: dict[str, Any]) -> None:
    """Write a JSON document atomically."""
    write_file(path, dump_json_document(data))
