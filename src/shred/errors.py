"""Errors raised by the lookup functions of `shred`."""


class NotFoundError(KeyError):
    """Raised when a nuclide or element is not listed in a reference table."""

    def __str__(self) -> str:
        # KeyError wraps its message in quotes
        if len(self.args) == 1:
            return str(self.args[0])
        return super().__str__()


class OutOfRangeError(IndexError):
    """Raised when an atomic number falls outside the periodic table."""
