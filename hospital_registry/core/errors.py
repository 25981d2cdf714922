# Registry exceptions
class GeneralSearchNotSupportedError(NotImplementedError):
    """Raised by the general (multi-criteria) search, which has no defined criteria yet."""

    def __init__(self, message: str = "General search is not supported"):
        super().__init__(message)
        self.message = message
