import json
from pathlib import Path
from typing import Any

REQUEST_OBJECTS_PATH = Path(__file__).resolve().parent / "request_objects"


def load_json(path) -> Any:
    """
    Read and parse a single JSON file.

    No error handling here: a missing or malformed fixture file should fail
    the test that needs it with the original FileNotFoundError/JSONDecodeError.
    """
    with open(path, "r", encoding="utf-8") as file:
        return json.load(file)


def load_request_object(resource: str, name: str) -> Any:
    """
    Load request_objects/<resource>/<name>.json.

    Every call parses the file again, so callers get their own copy and can
    overwrite fields without affecting tests running in parallel.
    """
    return load_json(REQUEST_OBJECTS_PATH / resource / f"{name}.json")
