"""searchbar package: arithmetic preview and address detection for a search box."""

__all__ = [
    "config",
    "types",
    "tokenizer",
    "shunting_yard",
    "evaluator",
    "calculator",
    "url",
    "router",
    "api",
    "cli",
    "logging_config",
]

# Public API exports

__api_exports__ = [
    "classify_arithmetic",
    "is_navigable_address",
    "classify",
    "preview",
    "navigate",
]
