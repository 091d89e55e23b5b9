class HarnessError(Exception):
    """Base class for every error raised by the API test harness."""


class StatusMismatchError(HarnessError, AssertionError):
    def __init__(self, method: str, url: str, expected: int, actual: int, logs: str = ""):
        self.method = method
        self.url = url
        self.expected = expected
        self.actual = actual
        self.logs = logs
        super().__init__(
            f"{method} {url}: expected status {expected}, got {actual}\n\n"
            f"Recent API Activity: \n{logs}"
        )


class SchemaLoadError(HarnessError):
    def __init__(self, path, reason: str):
        self.path = path
        super().__init__(f"Failed to read the schema file {path}: {reason}")


class SchemaMismatchError(HarnessError, AssertionError):
    def __init__(self, schema_name: str, violations, payload_dump: str):
        self.schema_name = schema_name
        self.violations = violations
        self.payload_dump = payload_dump
        lines = "\n".join(
            f"  - {v['path']}: {v['message']} (validator: {v['validator']})" for v in violations
        )
        super().__init__(
            f"Schema validation {schema_name} failed:\n{lines}\n\n"
            f"Actual response body: \n{payload_dump}"
        )


class ApiAssertionError(HarnessError, AssertionError):
    """An assertion failure enriched with the test's recent API activity."""
