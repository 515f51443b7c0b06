import logging
import signal

import psutil

logger = logging.getLogger(__name__)


def handle_sigint(signum, frame):
    """Ctrl+C reaches the children; the shell just keeps waiting"""
    print()


class ProcessTable:
    """Processes launched for the current batch.

    Everything is launched first, then `wait_all` blocks until every
    child has terminated. Nothing survives past one batch.
    """

    def __init__(self):
        self.procs = []
        self.cmdlines = {}

    def add(self, proc, cmdline):
        self.procs.append(proc)
        self.cmdlines[proc.pid] = cmdline
        logger.debug("[%d] started: %s", proc.pid, cmdline)

    def _on_exit(self, proc):
        logger.debug("[%d] finished (%s): %s", proc.pid, proc.returncode,
                      self.cmdlines.get(proc.pid, "?"))

    def wait_all(self):
        """
        Block until every recorded process has terminated, in any order.
        SIGINT does not interrupt the wait.
        Returns: {pid: returncode}
        """
        if not self.procs:
            return {}

        previous = signal.signal(signal.SIGINT, handle_sigint)
        try:
            # no timeout: returns only once every process is gone
            gone, _ = psutil.wait_procs(self.procs, timeout=None, callback=self._on_exit)
        finally:
            if previous is not None:
                signal.signal(signal.SIGINT, previous)
        statuses = {p.pid: p.returncode for p in gone}
        self.procs = []
        self.cmdlines = {}
        return statuses
