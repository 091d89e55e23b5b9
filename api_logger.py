import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union


@dataclass(frozen=True)
class RequestEntry:
    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: Any = None

    title = "Request Details"

    def as_dict(self) -> Dict[str, Any]:
        data = {"method": self.method, "url": self.url, "headers": self.headers}
        if self.body is not None:
            data["body"] = self.body
        return data


@dataclass(frozen=True)
class ResponseEntry:
    status_code: int
    body: Any = None

    title = "Response Details"

    def as_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"statusCode": self.status_code}
        if self.body is not None:
            data["body"] = self.body
        return data


LogEntry = Union[RequestEntry, ResponseEntry]


class APILogger:
    """
    Append-only record of one test's API traffic.

    Every request and response that goes through a RequestHandler bound to
    this logger is kept in call order, so a failing assertion can show
    exactly what the test sent and received. One instance per test.
    """

    def __init__(self):
        self._entries: List[LogEntry] = []

    def log_request(self, method: str, url: str, headers: Dict[str, str], body: Optional[Any] = None):
        self._entries.append(RequestEntry(method, url, dict(headers), body))

    def log_response(self, status_code: int, body: Optional[Any] = None):
        self._entries.append(ResponseEntry(status_code, body))

    @property
    def entries(self) -> Tuple[LogEntry, ...]:
        return tuple(self._entries)

    def __len__(self):
        return len(self._entries)

    def get_recent_logs(self) -> str:
        return "\n\n".join(
            f"==={entry.title}===\n{json.dumps(entry.as_dict(), indent=4, default=str)}"
            for entry in self._entries
        )
