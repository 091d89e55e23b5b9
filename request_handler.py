from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

import httpx

from api_logger import APILogger
from errors import StatusMismatchError
from logging_helper import log_status

Scalar = Union[str, int, float, bool]

WRITE_METHODS = ("POST", "PUT")


@dataclass
class RequestDescriptor:
    """Configuration of the one pending call; replaced wholesale after every dispatch."""

    base_url: Optional[str] = None
    path: str = ""
    query_params: Dict[str, Scalar] = field(default_factory=dict)
    headers: Dict[str, str] = field(default_factory=dict)
    body: Any = None
    clear_auth: bool = False


class RequestHandler:
    """
    Purpose:  Fluent builder for calls against the API under test.

        articles = api.path("/articles").params({"limit": 10, "offset": 0}).get_request(200)

    Why we do it this way:
    - Setters only record configuration and return self → one readable chain
      per call at the test site, no I/O until a *_request method runs.
    - The expected status is an argument of the dispatch → every call states
      its contract, and a mismatch fails with the whole API activity attached.
    - One handler per test, bound to that test's APILogger → failure output
      never mixes traffic from other tests or xdist workers.
    - The default token is injected automatically; clear_auth() opts out for
      a single call (signup, login-negative cases).
    """

    def __init__(self, client: httpx.Client, base_url: str, logger: APILogger,
                 auth_token: Optional[str] = None):
        self.client = client
        self.default_base_url = base_url
        self.logger = logger
        self.auth_token = auth_token
        self._pending = RequestDescriptor()

    @property
    def pending(self) -> RequestDescriptor:
        return self._pending

    # -----------------------------
    # Setters
    # -----------------------------
    def url(self, base_url: str) -> "RequestHandler":
        self._pending.base_url = base_url
        return self

    def path(self, path: str) -> "RequestHandler":
        self._pending.path = path
        return self

    def params(self, params: Dict[str, Scalar]) -> "RequestHandler":
        self._pending.query_params = dict(params)
        return self

    def headers(self, headers: Dict[str, str]) -> "RequestHandler":
        self._pending.headers = dict(headers)
        return self

    def body(self, body: Any) -> "RequestHandler":
        self._pending.body = body
        return self

    def clear_auth(self) -> "RequestHandler":
        self._pending.clear_auth = True
        return self

    # -----------------------------
    # Dispatch
    # -----------------------------
    def get_request(self, status_code: int) -> Any:
        return self._dispatch("GET", status_code)

    def post_request(self, status_code: int) -> Any:
        return self._dispatch("POST", status_code)

    def put_request(self, status_code: int) -> Any:
        return self._dispatch("PUT", status_code)

    def delete_request(self, status_code: int) -> None:
        self._dispatch("DELETE", status_code)

    def _dispatch(self, method: str, expected_status: int) -> Any:
        """
        Purpose:  Send the pending call, log it, reset the builder, check the status.

        Why we do it this way:
        - The request is logged before the network call, so even a transport
          error leaves a trace of what was about to be sent.
        - The status is checked before the body is parsed. A 404/500 with an
          HTML or empty body is reported as a StatusMismatchError with the full
          API activity, not as a JSONDecodeError.
        - GET bodies that do not parse after a matching status propagate the
          parse error; POST/PUT fall back to {} (write endpoints may answer with
          no body); DELETE never reads the body.
        - The pending configuration is replaced in a finally block, so nothing
          set for this call leaks into the next one, whatever the outcome.
        - __tracebackhide__ keeps this frame out of pytest tracebacks, so a
          failure points at the *_request call in the test.

        Returns: the parsed payload for GET/POST/PUT, None for DELETE

        Raises: StatusMismatchError, httpx.HTTPError, ValueError (GET only)
        """
        __tracebackhide__ = True
        pending = self._pending
        try:
            url = self._build_url(pending)
            headers = self._build_headers(pending)
            body = pending.body if method in WRITE_METHODS else None
            self.logger.log_request(method, url, headers, body)

            response = self.client.request(
                method,
                url,
                headers=headers,
                json=body if method in WRITE_METHODS else None,
            )
            actual_status = response.status_code

            if actual_status != expected_status:
                self.logger.log_response(actual_status, self._readable_body(response))
            else:
                payload = None
                if method == "GET":
                    payload = response.json()
                elif method in WRITE_METHODS:
                    try:
                        payload = response.json()
                    except ValueError:
                        payload = {}
                self.logger.log_response(actual_status, payload)
        finally:
            self._pending = RequestDescriptor()

        if actual_status != expected_status:
            log_status("error", f"{method} {url} -> {actual_status}", f" (expected {expected_status})")
            raise StatusMismatchError(method, url, expected_status, actual_status,
                                      self.logger.get_recent_logs())
        log_status("good", f"{method} {url} -> {actual_status}")
        return payload

    @staticmethod
    def _readable_body(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return response.text or None

    def _build_url(self, pending: RequestDescriptor) -> str:
        url = httpx.URL(f"{pending.base_url or self.default_base_url}{pending.path}")
        if pending.query_params:
            url = url.copy_merge_params(pending.query_params)
        return str(url)

    def _build_headers(self, pending: RequestDescriptor) -> Dict[str, str]:
        headers = {k: v for k, v in pending.headers.items() if k.lower() != "authorization"}
        if pending.clear_auth:
            return headers
        custom_auth = next(
            (v for k, v in pending.headers.items() if k.lower() == "authorization"), None
        )
        token = custom_auth if custom_auth is not None else self.auth_token
        if token:
            headers["Authorization"] = token
        return headers
