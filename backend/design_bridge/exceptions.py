"""Custom exceptions for the design bridge."""


class SceneInputError(ValueError):
    """Malformed scene input: invalid JSON, unknown node tag or missing field."""
    pass


class UnsupportedNodeTypeError(SceneInputError):
    """A node type (scene tag or host class) the builder/serializer cannot handle."""

    def __init__(self, node_type: str):
        super().__init__(f"Unsupported node type: {node_type}")
        self.node_type = node_type


class HostContractError(RuntimeError):
    """The host API was used in an order it does not allow (e.g. font not loaded yet)."""
    pass


class SchemaValidationError(ValueError):
    """A design-file document did not match the design-file schema."""
    pass


class PromptValidationError(ValueError):
    """Prompt request rejected before reaching the upstream model."""
    pass


class UpstreamError(RuntimeError):
    """Raise when a remote API call failed; carries the HTTP status to surface."""

    def __init__(self, detail: str, *, status_code: int = 500):
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code


class MissingAPIKeyError(UpstreamError):
    """Required API key is not configured; no network call was attempted."""

    def __init__(self, detail: str = "API key is not configured"):
        super().__init__(detail, status_code=401)
