class UnhashableKeyError(TypeError):
    """Raised when a key cannot be used as a lookup-table key."""

    def __init__(self, operation: str, key):
        self.operation = operation
        self.key_type = type(key).__name__
        super().__init__(
            f"OrderedMap.{operation}: unhashable key type '{self.key_type}'"
        )
