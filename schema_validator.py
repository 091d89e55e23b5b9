import json
import re
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from genson import SchemaBuilder
from jsonschema import Draft7Validator, FormatChecker

from errors import SchemaLoadError, SchemaMismatchError
from logging_helper import log_status

SCHEMA_BASE_PATH = Path(__file__).resolve().parent / "response-schemas"
SCHEMA_URI = "http://json-schema.org/draft-07/schema#"

FORMAT_CHECKER = FormatChecker()

# Candidate patterns; detect_format confirms each value with FORMAT_CHECKER.
FORMAT_PATTERNS = [
    ("date-time", re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?(Z|[+-]\d{2}:\d{2})$")),
    ("uuid", re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$", re.I)),
    ("email", re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")),
    ("uri", re.compile(r"^https?://[A-Za-z0-9\-._~:/?#@!$&'()*+,;=%]+$")),
]


def schema_path(dir_name: str, file_name: str, base_path: Path = SCHEMA_BASE_PATH) -> Path:
    return Path(base_path) / dir_name / f"{file_name}_schema.json"


def validate_schema(dir_name: str, file_name: str, response_body: Any,
                    create_schema: bool = False, base_path: Path = SCHEMA_BASE_PATH) -> None:
    """
    Purpose:  Validate a response body against
              response-schemas/<dir_name>/<file_name>_schema.json.

    Why we do it this way:
    - Schemas live in files, one per endpoint and method → contract changes
      show up as diffs, and create_schema=True (re)generates a file from a
      real response instead of writing it by hand.
    - Draft7Validator.iter_errors instead of jsonschema.validate → every
      violation is reported at once, not only the first.
    - The shared FORMAT_CHECKER checks the date-time/email/uri/uuid formats
      the schema declares, the same checker used when formats are inferred.

    Raises:
        SchemaLoadError: the schema file is missing or is not valid JSON.
        SchemaMismatchError: the body does not conform to the schema.
    """
    path = schema_path(dir_name, file_name, base_path)
    if create_schema:
        generate_schema(response_body, path)

    schema = load_schema(path)
    validator = Draft7Validator(schema, format_checker=FORMAT_CHECKER)
    errors = sorted(validator.iter_errors(response_body), key=lambda e: [str(p) for p in e.path])
    if errors:
        violations = [
            {
                "path": ".".join(str(p) for p in e.path) if e.path else "<root>",
                "message": e.message,
                "validator": e.validator,
                "schema_path": list(e.schema_path),
            }
            for e in errors
        ]
        raise SchemaMismatchError(
            path.name, violations, json.dumps(response_body, indent=4, default=str)
        )


def load_schema(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as file:
            return json.load(file)
    except (OSError, ValueError) as e:
        raise SchemaLoadError(path, str(e)) from e


def generate_schema(response_body: Any, path: Path) -> Dict[str, Any]:
    builder = SchemaBuilder(schema_uri=SCHEMA_URI)
    builder.add_object(response_body)
    schema = add_formats(builder.to_schema(), [response_body])

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as file:
        json.dump(schema, file, indent=4)
    log_status("warning", f"Generated schema {path}")
    return schema


def add_formats(schema: Dict[str, Any], samples: List[Any]) -> Dict[str, Any]:
    """Return a copy of a generated schema with string formats inferred from the samples."""
    if not isinstance(schema, dict):
        return schema
    schema = dict(schema)

    if schema.get("type") == "array" and isinstance(schema.get("items"), dict):
        items = [item for sample in samples if isinstance(sample, list) for item in sample]
        schema["items"] = add_formats(schema["items"], items)

    elif schema.get("type") == "object" and isinstance(schema.get("properties"), dict):
        objects = [sample for sample in samples if isinstance(sample, dict)]
        properties = {}
        for key, prop in schema["properties"].items():
            values = [obj[key] for obj in objects if key in obj]
            if isinstance(prop, dict) and prop.get("type") == "string" and "format" not in prop:
                fmt = detect_format(values)
                properties[key] = dict(prop, format=fmt) if fmt else prop
            else:
                properties[key] = add_formats(prop, values)
        schema["properties"] = properties

    return schema


def detect_format(values: Iterable[Any]) -> Optional[str]:
    """
    Purpose:  Pick the string format every sampled value satisfies, if any.

    Why we do it this way:
    - The regex table only shortlists candidates (a bare "@" would otherwise
      count as an email). The final word belongs to the same FormatChecker
      validate_schema uses, so a value it would reject (2025-02-30, a stray %)
      never earns a format, and a generated schema always accepts its sample.
    - A checker that cannot decide (raises) counts as "does not conform".

    Returns: "date-time", "uuid", "email", "uri" or None
    """
    values = list(values)
    if not values or not all(isinstance(v, str) for v in values):
        return None
    for fmt, pattern in FORMAT_PATTERNS:
        if all(pattern.match(v) and _conforms(v, fmt) for v in values):
            return fmt
    return None


def _conforms(value: str, fmt: str) -> bool:
    try:
        return FORMAT_CHECKER.conforms(value, fmt)
    except (TypeError, ValueError):
        return False
