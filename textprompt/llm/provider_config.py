"""Provider/runtime configuration for the Gemini text client.

Architectural role:
    Centralizes endpoint, model, prompt and credential lookup for
    `textprompt.llm.client`, `textprompt.llm.service` and the CLI entrypoint.

Model call flow integration:
    - `client.build_url` consumes `GEMINI_URL_TEMPLATE` and `MODEL_NAME`.
    - `service.generate_text` consumes `MODEL_NAME` and `load_key`.
    - `api.main` consumes `DEFAULT_PROMPT` and `LOG_LEVEL`.

Determinism:
    Deterministic for a fixed process environment. Values are resolved at
    import time, after `.env` has been loaded.

Failure behavior:
    Missing key material is represented as `None` and passed through to the
    client unchecked.
"""

import os
from dotenv import load_dotenv

load_dotenv()

# Primary model routing controls.
MODEL_NAME = os.getenv("GEMINI_MODEL", "gemini-1.5-flash")

GEMINI_URL_TEMPLATE = (
    "https://generativelanguage.googleapis.com/v1beta/models/"
    "{model}:generateContent?key={key}"
)

API_KEY_ENV = "GOOGLE_API_KEY"

# Demo prompt sent by the CLI when no prompt arguments are given.
DEFAULT_PROMPT = os.getenv("TEXTPROMPT_PROMPT", "Hello Gemini.")

LOG_LEVEL = os.getenv("TEXTPROMPT_LOG_LEVEL", "WARNING")


def load_key(env_name=API_KEY_ENV):
    """Return the API key from the environment, or `None` when unset.

    The value is not validated; an empty string is returned as-is.
    """
    return os.getenv(env_name)
