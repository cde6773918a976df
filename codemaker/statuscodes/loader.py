"""Load a status-code table from YAML."""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from jsonschema import Draft202012Validator

from codemaker.errors import (
    InvalidInputSchemaError,
    InvalidYamlFormatError,
    MissingInputFileError,
    UnreadableInputFileError,
)
from codemaker.statuscodes.models import StatusCodes

SCHEMA_PATH = Path(__file__).resolve().parent / "schema.json"


def format_schema_error(error: Any) -> str:
    path = ".".join([str(part) for part in error.path])
    return f"{error.message} at {path}" if path else str(error.message)


@lru_cache(maxsize=1)
def _validator() -> Draft202012Validator:
    return Draft202012Validator(json.loads(SCHEMA_PATH.read_text(encoding="utf-8")))


def parse_status_codes(payload: Any, path: Path) -> StatusCodes:
    error = next(iter(_validator().iter_errors(payload)), None)
    if error is not None:
        raise InvalidInputSchemaError(path, format_schema_error(error))
    return StatusCodes.from_pairs((code, name) for code, name in payload["codes"])


def load_status_codes(path: Path) -> StatusCodes:
    if not path.exists():
        raise MissingInputFileError(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise UnreadableInputFileError(path, str(exc)) from exc
    try:
        payload = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise InvalidYamlFormatError(path, str(exc).splitlines()[0]) from exc
    return parse_status_codes(payload, path)
