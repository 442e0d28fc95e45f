class ClarityError(Exception):
    """Base class for errors a caller of solve() is expected to handle."""

    message = "clarity error"

    def __init__(self, detail: str = ""):
        self.detail = detail
        super().__init__(f"{self.message}: {detail}" if detail else self.message)


class BadBoard(ClarityError):
    """The board is empty, jagged, or holds something other than lowercase letters."""

    message = "bad board"


class NoDictionaryFound(ClarityError):
    """The word list could not be opened or read."""

    message = "no dictionary found"
