"""textprompt: one-shot text prompts against the Gemini generateContent API.

Architectural role:
    Package root for the LLM transport layer (`llm`), its result contracts
    (`core`) and the command-line adapter (`api`).
"""
