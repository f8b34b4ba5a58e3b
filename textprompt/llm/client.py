"""Gemini `generateContent` transport client.

Architectural role:
    Builds the request URL and JSON envelope, executes one HTTP POST against
    the configured model and extracts the first candidate's text from the
    response envelope.

Model invocation flow:
    `service.generate_text` -> `text_prompt(api_key, prompt)` ->
    `generate_content(...)` -> `parse_response_text(body)` -> result variant
    -> rendered string.

Retry behavior:
    No retry loop is implemented. Each call is attempted once and blocks until
    the transport resolves or fails; no timeout is configured.

Connection lifecycle:
    One `requests.Session` is opened per call and closed on every path,
    together with the response it produced. No connection reuse across calls.

Failure handling model:
    Transport, status and parse failures are returned as variants from
    `textprompt.core.result_types` instead of raised. `text_prompt` renders
    them into the plain string contract used by the CLI.
"""

import json
import logging

import requests

from textprompt.core.result_types import (
    HttpError,
    NetworkError,
    ParseError,
    TextResult,
)
from textprompt.llm.provider_config import GEMINI_URL_TEMPLATE, MODEL_NAME

logger = logging.getLogger(__name__)

CANDIDATES_KEY = "candidates"
CONTENT_KEY = "content"
CONTENTS_KEY = "contents"
PARTS_KEY = "parts"
TEXT_KEY = "text"

HEADERS = {"Content-Type": "application/json"}


def build_url(api_key, model=MODEL_NAME):
    """Substitute model and key into the endpoint template.

    The key is not validated or escaped; `None` renders as an empty key.
    """
    return GEMINI_URL_TEMPLATE.format(model=model, key=api_key or "")


def _redact(url):
    """Return `url` with the query-string key masked for logging."""
    base, sep, _ = url.partition("?key=")
    return base + (sep + "***" if sep else "")


def build_payload(prompt):
    """Wrap `prompt` in the single-content, single-part request envelope."""
    return {CONTENTS_KEY: [{PARTS_KEY: [{TEXT_KEY: prompt}]}]}


def serialize_payload(prompt):
    """Return the compact JSON request body for `prompt`.

    Non-ASCII characters, lone surrogates included, are sent as `\\uXXXX`
    escapes so any `str` prompt serializes.
    """
    return json.dumps(
        build_payload(prompt),
        separators=(",", ":"),
    ).encode("ascii")


def parse_response_text(raw):
    """Extract `candidates[0].content.parts[0].text` from a response body.

    Args:
        raw: Response body as `str` or `bytes`.

    Returns:
        `TextResult` on success, `ParseError` when the body is not JSON or
        does not have the expected shape. Parse failures are logged at
        ERROR level and never raised.
    """
    try:
        data = json.loads(raw)
    except ValueError as err:
        logger.error("Error parsing JSON: %s", err)
        return ParseError(f"invalid JSON: {err}")

    try:
        candidate = data[CANDIDATES_KEY][0]
        text = candidate[CONTENT_KEY][PARTS_KEY][0][TEXT_KEY]
    except KeyError as err:
        logger.error("Error parsing JSON: missing key %s", err)
        return ParseError(f"missing key {err}")
    except (IndexError, TypeError) as err:
        logger.error("Error parsing JSON: unexpected envelope shape (%s)", err)
        return ParseError(f"unexpected envelope shape: {err}")

    if not isinstance(text, str):
        logger.error("Error parsing JSON: text is %s, not a string", type(text).__name__)
        return ParseError(f"text is {type(text).__name__}, not a string")

    return TextResult(text)


def _error_detail(response):
    """Return `error.message` from a JSON error body, or `None`."""
    try:
        return response.json()["error"]["message"]
    except (ValueError, KeyError, TypeError):
        return None


def generate_content(api_key, prompt, model=MODEL_NAME):
    """Send one prompt and return a structured result.

    Args:
        api_key: Opaque credential appended to the URL; not validated.
        prompt: Arbitrary text; not validated.
        model: Model identifier substituted into the endpoint template.

    Returns:
        One of `TextResult`, `HttpError`, `ParseError` or `NetworkError`.
    """
    url = build_url(api_key, model)
    body = serialize_payload(prompt)

    logger.debug("POST %s (%d bytes)", _redact(url), len(body))

    try:
        with requests.Session() as session:
            with session.post(url, data=body, headers=HEADERS) as response:

                if response.status_code != requests.codes.ok:
                    result = HttpError(
                        status_code=response.status_code,
                        reason=response.reason or "",
                        detail=_error_detail(response),
                    )
                    logger.warning(
                        "Gemini request failed with status %s: %s",
                        result.status_code,
                        result.reason,
                    )
                    return result

                return parse_response_text(response.content)

    except requests.exceptions.RequestException as err:
        logger.warning("Could not reach %s: %s", _redact(url), err)
        return NetworkError(str(err))


def text_prompt(api_key, prompt, model=MODEL_NAME):
    """Send one prompt and return the generated text or a failure description.

    Returns:
        - Extracted text on success.
        - `None` when a 200 body could not be parsed (error is logged).
        - `"Request failed. ( <status>) : <reason>"` for non-200 responses.
        - `"Could not establish connection : <detail>"` on transport failure.
    """
    return generate_content(api_key, prompt, model=model).to_text()
