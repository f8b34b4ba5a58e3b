"""Prompt-to-client adapter for Gemini invocation.

Architectural role:
    Provides the canonical text-generation entrypoint used by the CLI. It
    resolves configured defaults (model, API key) and delegates transport to
    `textprompt.llm.client`.

Model call flow:
    prompt -> key/model resolution -> `client.text_prompt(...)`.

Determinism:
    Key and model resolution are deterministic for a fixed environment.
    Generated output remains non-deterministic because inference runs remotely.
"""

from textprompt.llm.client import generate_content, text_prompt
from textprompt.llm.provider_config import MODEL_NAME, load_key


def generate_text(prompt: str, api_key=None, model=None):
    """Invoke the configured model and return the rendered text.

    Args:
        prompt: Text to send as the single user part.
        api_key: Explicit credential. When `None`, `GOOGLE_API_KEY` is looked
            up at call time; the CLI resolves it once and passes it in.
        model: Explicit model identifier; falls back to `MODEL_NAME`.

    Returns:
        Generated text, `None` on an unparseable body, or a failure string
        (delegated by `client.text_prompt`).
    """
    key = api_key if api_key is not None else load_key()
    return text_prompt(key, prompt, model=model or MODEL_NAME)


def generate_result(prompt: str, api_key=None, model=None):
    """Structured variant of `generate_text` returning a result object."""
    key = api_key if api_key is not None else load_key()
    return generate_content(key, prompt, model=model or MODEL_NAME)
