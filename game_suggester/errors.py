class SuggesterError(Exception):
    """Base class for errors surfaced by the suggestion API."""

    message = "Something went wrong."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        self.message = message or self.message


class ConfigurationError(SuggesterError):
    message = "Missing Steam API credentials."


class NoGamesError(SuggesterError):
    # Usually a private profile or private game details
    message = "No games found."


class TransportFailure(SuggesterError):
    message = "Failed to fetch games."


class DetailLookupFailure(SuggesterError):
    message = "Could not fetch game details."
