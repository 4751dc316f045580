"""CLI calculator package: tokenizer, evaluator, history and CLI."""

__all__ = [
    "api",
    "cli",
    "config",
    "evaluator",
    "history",
    "logging_config",
    "operators",
    "tokenizer",
    "types",
]

# Public API exports

__api_exports__ = [
    "evaluate",
    "validate_expression",
    "format_result",
]
