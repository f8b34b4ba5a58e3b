"""textprompt CLI adapter package.

Architectural role:
- Defines the terminal interaction boundary.
- Delegates model invocation to `textprompt.llm.service`.
"""
