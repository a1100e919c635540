class TermchatError(Exception):
    pass


class SessionError(TermchatError, OSError):
    """The terminal couldn't be switched into raw mode / the alternate screen."""


class LayoutError(TermchatError):
    """The terminal is too small to hold every UI section."""

    def __init__(self, got: int, wanted: int = 3):
        super().__init__(f"Couldn't create all {wanted} UI sections (only got {got})")
        self.got = got
        self.wanted = wanted
