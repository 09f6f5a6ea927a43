class InvalidParameter(ValueError):
    """Raised when a filter is configured with an invalid value, e.g., a
    filter constant outside ]0; 1] or a non-positive window length. It is
    always raised at construction (or `resize`) time."""

    pass


class ConfigurationMismatch(ValueError):
    """Raised when the input passed to a multi-stream filter does not match
    its channel layout."""

    pass
