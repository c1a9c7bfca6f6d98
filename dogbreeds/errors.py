"""Dog breeds lookup errors."""


class BreedNotFoundError(LookupError):
    """Sub breeds of a breed could not be fetched.

    Raised for every failure: blank name, transport error, bad status,
    malformed payload or a breed unknown to the API.
    The proximate cause, if any, is kept in `__cause__`.
    """

    def __init__(self, message: str, breed: str | None = None):
        self.breed = breed
        super().__init__(message)
