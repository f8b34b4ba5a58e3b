import json
from unittest import mock

import pytest


def _make_response(status_code=200, body=b"", reason="OK"):
    """Build a context-managed response double for `session.post`."""
    if isinstance(body, (dict, list)):
        body = json.dumps(body).encode("utf-8")

    response = mock.MagicMock()
    response.status_code = status_code
    response.reason = reason
    response.content = body
    response.json.side_effect = lambda: json.loads(body)
    response.__enter__.return_value = response
    response.__exit__.return_value = False
    return response


@pytest.fixture
def session_mock():
    with mock.patch("textprompt.llm.client.requests.Session") as session_cls:
        session = session_cls.return_value
        session.__enter__.return_value = session
        session.__exit__.return_value = False
        yield session


@pytest.fixture
def make_response():
    return _make_response
