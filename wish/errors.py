import sys
from wish.config import ERROR_MESSAGE


class WishError(Exception):
    """Base class for shell errors"""


class GrammarError(WishError):
    """Malformed line: bad redirect or bad '&' grouping"""


class BuiltinError(WishError):
    """Built-in called with wrong arguments or failed to apply"""


class ExitShell(Exception):
    """Raised by the exit built-in to stop the read loop right away"""

    def __init__(self, status=0):
        super().__init__(status)
        self.status = status


def report_error(stream=None):
    """Write the fixed error message once."""
    stream = stream or sys.stderr
    stream.write(ERROR_MESSAGE)
    stream.flush()
