import os
from dataclasses import dataclass
from typing import Optional

from logging_helper import log_status

DEFAULT_ENV = "dev"
API_URL = "https://conduit-api.bondaracademy.com/api"

# Hardcoded test accounts, one per environment.
CREDENTIALS = {
    "dev": ("lmparris21@test.com", "apitesting123!"),
    "qa": ("pwapiuser@test.com", "Welcome"),
    "prod": ("pwtest@test.com", "Welcome2"),
}


@dataclass(frozen=True)
class ApiConfig:
    env: str
    api_url: str
    user_email: str
    user_password: str


def load_config(env: Optional[str] = None) -> ApiConfig:
    """
    Build the configuration for the selected environment.

    The environment comes from the argument, else TEST_ENV, else "dev".
    API_URL overrides the base URL for every environment.
    """
    env = (env or os.getenv("TEST_ENV") or DEFAULT_ENV).lower()
    if env not in CREDENTIALS:
        raise ValueError(f"Unknown TEST_ENV '{env}', expected one of {sorted(CREDENTIALS)}")
    email, password = CREDENTIALS[env]
    log_status("info", f"Test environment is: {env}")
    return ApiConfig(
        env=env,
        api_url=os.getenv("API_URL", API_URL),
        user_email=email,
        user_password=password,
    )
