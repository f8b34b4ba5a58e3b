"""LLM access package.

Architectural role:
    Provides provider configuration, the HTTP transport client and the
    prompt-level service used by the CLI entrypoint.

Module split:
    - `provider_config`: environment-driven endpoint, model and key lookup.
    - `client`: request envelope, HTTP transport and response parsing.
    - `service`: canonical prompt-to-client adapter.
"""
