import logging
import os

from wish.config import DEFAULT_PATH

logger = logging.getLogger(__name__)


class SearchPath:
    """Ordered directories searched for external programs.

    Always replaced as a whole by the `path` built-in, never appended to.
    An empty search path is valid; every lookup then comes back empty.
    """

    def __init__(self, dirs=None):
        self.dirs = list(DEFAULT_PATH if dirs is None else dirs)

    def replace(self, dirs):
        self.dirs = list(dirs)
        logger.debug("search path set to %s", self.dirs)

    def candidates(self, name):
        """
        Build the paths to try for a program, in search order.
        Returns: list of str
        """
        return [d + os.sep + name for d in self.dirs]

    def __repr__(self):
        return f"SearchPath({self.dirs!r})"
