class ProfileConfigurationError(Exception):
    """
    Fatal error raised when the power profile document is absent, unreadable or not well-formed.
    No partial profile is ever exposed after this error.
    """
    def __init__(self, source, reason: str, original_exception: Exception = None):
        self.source = source
        self.reason = reason
        self.original_exception = original_exception
        super().__init__(f"Cannot load power profile from '{source}': {reason}")
