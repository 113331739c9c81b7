"""Custom exception hierarchy for observact."""


class ObservactError(Exception):
    """Base exception for all observact errors."""


# --- Configuration ---
class ConfigError(ObservactError):
    """Invalid or missing configuration."""


class DuplicateDomainError(ConfigError):
    """Two domain declarations share the same key."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"domain `{key}` is declared more than once")


class UnknownMiddlewareError(ConfigError):
    """A store definition references a middleware that is not built in."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"no built-in middleware named `{name}`")


# --- Store ---
class StoreError(ObservactError):
    """Store protocol error."""


class DomainNotFound(StoreError, LookupError):
    """Domain key was not declared when the store was created."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(
            f"domain `{key}` is not specified during `create_store` phase"
        )
