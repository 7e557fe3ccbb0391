# clients/errors.py


class ProviderError(Exception):
    """A provider answered, but not with anything we can read."""

    def __init__(self, provider: str, message: str):
        super().__init__(f"{provider}: {message}")
        self.provider = provider
