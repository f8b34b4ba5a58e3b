"""
Command-line entrypoint for textprompt.

Architectural role:
- Provides a one-shot terminal interface over the LLM service.
- Delegates the request/parse cycle to `textprompt.llm.service.generate_text`.

Request lifecycle:
1. Configure logging to stderr.
2. Resolve the prompt from argv, falling back to `DEFAULT_PROMPT`.
3. Read `GOOGLE_API_KEY` once and call the service with it.
4. Print the returned text or failure string to stdout.

Error handling strategy:
- No handling beyond what the client encodes into its return value.
- The process exit status is always 0; failures are reported only as text.
"""

import logging
import sys

from textprompt.llm.provider_config import DEFAULT_PROMPT, LOG_LEVEL, load_key
from textprompt.llm.service import generate_text


# =========================================================
# UTF-8 SAFE STDOUT
# Configures best-effort UTF-8 console output without failing startup.
# =========================================================

if hasattr(sys.stdout, "reconfigure"):
    try:
        sys.stdout.reconfigure(encoding="utf-8", errors="ignore")
    except (AttributeError, ValueError, OSError):
        pass


def main(argv=None):
    """Send one prompt and print the response.

    Args:
        argv: Prompt words; defaults to `sys.argv[1:]`. Joined with spaces.

    Returns:
        Always 0.
    """
    level = logging.getLevelName(LOG_LEVEL.upper())
    if not isinstance(level, int):
        level = logging.WARNING

    logging.basicConfig(
        stream=sys.stderr,
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Credential is read once per process and passed down explicitly.
    api_key = load_key()

    if argv is None:
        argv = sys.argv[1:]

    prompt = " ".join(argv) if argv else DEFAULT_PROMPT

    response = generate_text(prompt, api_key=api_key)
    print(response)

    return 0


if __name__ == "__main__":
    sys.exit(main())
