from typing import Optional

import httpx

from api_config import load_config
from api_logger import APILogger
from request_handler import RequestHandler

TIMEOUT = 10


def make_client(**kwargs) -> httpx.Client:
    kwargs.setdefault("timeout", TIMEOUT)
    return httpx.Client(**kwargs)


def create_token(email: str, password: str, base_url: Optional[str] = None,
                 transport: Optional[httpx.BaseTransport] = None) -> str:
    """
    Purpose:  Log in and return the value for the Authorization header ("Token <jwt>").

    Why we do it this way:
    - Own short-lived httpx client, closed in finally → the login exchange
      never shows up in a test's API activity and no connection is leaked.
    - Goes through RequestHandler like every other call → a failed login is a
      StatusMismatchError with the login request/response attached.
    - transport is injectable → unit tests can fake the login endpoint with
      httpx.MockTransport instead of hitting the real API.

    Returns: "Token " + user.token from the login response

    Raises: StatusMismatchError if the login does not answer 200
    """
    base_url = base_url or load_config().api_url
    client = make_client(transport=transport) if transport else make_client()
    try:
        api = RequestHandler(client, base_url, APILogger())
        token_response = (
            api.path("/users/login")
            .body({"user": {"email": email, "password": password}})
            .post_request(200)
        )
        return "Token " + token_response["user"]["token"]
    finally:
        client.close()
