from typing import Any

from hamcrest import assert_that, equal_to, is_not, less_than_or_equal_to

from api_logger import APILogger
from errors import ApiAssertionError, SchemaMismatchError
from schema_validator import SCHEMA_BASE_PATH, validate_schema


class Expectation:
    """
    Assertions on one value, reported with the test's recent API activity.

    Pass/fail is decided by hamcrest exactly as `assert_that` would decide it;
    only the failure message is extended with the APILogger dump.
    """

    def __init__(self, actual: Any, logger: APILogger, negated: bool = False,
                 schema_base_path=SCHEMA_BASE_PATH):
        self.actual = actual
        self.logger = logger
        self.negated = negated
        self.schema_base_path = schema_base_path

    @property
    def not_(self) -> "Expectation":
        return Expectation(self.actual, self.logger, not self.negated, self.schema_base_path)

    def should_equal(self, expected: Any) -> None:
        __tracebackhide__ = True
        self._check(equal_to(expected))

    def should_be_less_than_or_equal(self, expected: Any) -> None:
        __tracebackhide__ = True
        self._check(less_than_or_equal_to(expected))

    def should_match_schema(self, dir_name: str, file_name: str, create_schema: bool = False) -> None:
        """
        Purpose:  Assert the value conforms to a stored (or freshly generated) JSON schema.

        Why we do it this way:
        - Only SchemaMismatchError means "does not match"; that is the one
          outcome .not_ turns into a pass.
        - Anything else (missing or unreadable schema file, a malformed schema
          such as {"type": "strin"}, a write error while generating) is a broken
          setup and fails the test whether negated or not, with the recent API
          activity attached like every other failure here.
        """
        __tracebackhide__ = True
        try:
            validate_schema(dir_name, file_name, self.actual, create_schema, self.schema_base_path)
        except SchemaMismatchError as e:
            if not self.negated:
                self._fail(str(e), e)
            return
        except Exception as e:
            self._fail(f"Schema check {file_name}_schema.json could not run: {type(e).__name__}: {e}", e)
        if self.negated:
            self._fail(f"Expected {file_name}_schema.json not to match, but it did")

    def _check(self, matcher) -> None:
        __tracebackhide__ = True
        if self.negated:
            matcher = is_not(matcher)
        try:
            assert_that(self.actual, matcher)
        except AssertionError as e:
            self._fail(str(e).strip(), e)

    def _fail(self, message: str, cause: BaseException = None) -> None:
        __tracebackhide__ = True
        raise ApiAssertionError(
            f"{message}\n\nRecent API Activity: \n{self.logger.get_recent_logs()}"
        ) from cause


class ApiExpect:
    """Per-test entry point: `expect(value).should_equal(...)`, bound to one APILogger."""

    def __init__(self, logger: APILogger, schema_base_path=SCHEMA_BASE_PATH):
        self.logger = logger
        self.schema_base_path = schema_base_path

    def __call__(self, actual: Any) -> Expectation:
        return Expectation(actual, self.logger, schema_base_path=self.schema_base_path)
