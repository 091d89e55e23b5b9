import json

import pytest

from api_logger import APILogger, RequestEntry, ResponseEntry


@pytest.fixture
def logger():
    return APILogger()


def test_new_logger_is_empty(logger):
    assert len(logger) == 0
    assert logger.get_recent_logs() == ""


def test_entries_keep_call_order(logger):
    logger.log_request("POST", "https://api.test/articles", {"Authorization": "Token t"}, {"foo": "bar"})
    logger.log_response(201, {"foo": "bar"})
    logger.log_request("DELETE", "https://api.test/articles/x", {})
    logger.log_response(204)

    assert logger.entries == (
        RequestEntry("POST", "https://api.test/articles", {"Authorization": "Token t"}, {"foo": "bar"}),
        ResponseEntry(201, {"foo": "bar"}),
        RequestEntry("DELETE", "https://api.test/articles/x", {}),
        ResponseEntry(204),
    )


def test_logged_headers_are_copied(logger):
    headers = {"X-One": "1"}
    logger.log_request("GET", "https://api.test", headers)
    headers["X-Two"] = "2"
    assert logger.entries[0].headers == {"X-One": "1"}


def test_dump_format(logger):
    logger.log_request("POST", "https://api.test/articles", {"Authorization": "Token t"}, {"foo": "bar"})
    logger.log_response(200, {"ok": True})

    request_block, response_block = logger.get_recent_logs().split("\n\n")
    assert request_block.startswith("===Request Details===\n")
    assert json.loads(request_block.split("\n", 1)[1]) == {
        "method": "POST",
        "url": "https://api.test/articles",
        "headers": {"Authorization": "Token t"},
        "body": {"foo": "bar"},
    }
    assert response_block == "===Response Details===\n" + json.dumps({"statusCode": 200, "body": {"ok": True}}, indent=4)


def test_dump_omits_missing_bodies(logger):
    logger.log_request("GET", "https://api.test/tags", {})
    logger.log_response(204)
    logs = logger.get_recent_logs()
    assert '"body"' not in logs
    assert '"statusCode": 204' in logs


def test_loggers_are_independent():
    first, second = APILogger(), APILogger()
    first.log_request("GET", "https://api.test/one", {})
    second.log_request("GET", "https://api.test/two", {})
    assert "/one" in first.get_recent_logs() and "/two" not in first.get_recent_logs()
    assert "/two" in second.get_recent_logs() and "/one" not in second.get_recent_logs()
