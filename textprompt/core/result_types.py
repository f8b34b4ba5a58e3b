"""Result data contracts for `textprompt.llm.client`.

Architectural role:
    Defines the closed set of outcomes a single `generateContent` call can
    produce. `client.generate_content` returns exactly one of these; the
    string-returning `client.text_prompt` renders them via `to_text()`.

Variants:
    - `TextResult`: HTTP 200 with the expected envelope shape.
    - `NetworkError`: the request never produced a status line.
    - `HttpError`: any non-200 status.
    - `ParseError`: HTTP 200 whose body is not the expected envelope.

Determinism:
    The data classes are purely structural and state-free.
"""

from dataclasses import dataclass

CONNECTION_FAILURE_PREFIX = "Could not establish connection : "


@dataclass(frozen=True)
class TextResult:
    """Generated text of the first candidate."""

    text: str

    ok = True

    def to_text(self):
        return self.text


@dataclass(frozen=True)
class NetworkError:
    """Transport failure (DNS, TCP, TLS) before any response was received.

    Attributes:
        message: Text of the underlying transport exception.
    """

    message: str

    ok = False

    def to_text(self):
        return CONNECTION_FAILURE_PREFIX + self.message


@dataclass(frozen=True)
class HttpError:
    """Non-200 response from the provider.

    Attributes:
        status_code: HTTP status code.
        reason: Provider-supplied status message (HTTP reason phrase).
        detail: `error.message` from a JSON error body, when present.
    """

    status_code: int
    reason: str
    detail: str | None = None

    ok = False

    def to_text(self):
        text = f"Request failed. ( {self.status_code}) : {self.reason}"
        if self.detail:
            text += f" - {self.detail}"
        return text


@dataclass(frozen=True)
class ParseError:
    """HTTP 200 body that does not hold `candidates[0].content.parts[0].text`."""

    message: str

    ok = False

    def to_text(self):
        # Parse failures surface as a missing value in the string contract.
        return None
