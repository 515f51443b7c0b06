import logging
import sys

from wish.config import PROMPT
from wish.errors import ExitShell, GrammarError, report_error
from wish.executor import execute_batch
from wish.parser import parse_command
from wish.search_path import SearchPath

logger = logging.getLogger(__name__)


class ShellSession:
    """State shared by one shell run: search path and error stream."""

    def __init__(self, search_path=None, stderr=None):
        self.search_path = SearchPath(search_path)
        self.stderr = sys.stderr if stderr is None else stderr


def run_line(line, session):
    """
    Parse and execute one input line.
    A grammar error aborts the whole line before anything runs.
    Returns: {pid: returncode} of the processes the line launched
    Raises: ExitShell
    """
    try:
        batch = parse_command(line)
    except GrammarError as e:
        logger.debug("grammar error in %r: %s", line, e)
        report_error(session.stderr)
        return {}

    if not batch:
        return {}

    return execute_batch(batch, session)


def run_batch(session, stream):
    """
    Execute every line of a script, no prompt.
    Returns: exit status for the shell
    """
    try:
        for line in stream:
            run_line(line, session)
    except ExitShell as e:
        return e.status
    return 0


def main_loop(session, prompt=PROMPT):
    """Interactive loop: prompt, read, run until EOF or `exit`."""
    while True:
        try:
            line = input(prompt)
        except EOFError:
            return 0
        except KeyboardInterrupt:
            print()
            continue

        try:
            run_line(line, session)
        except ExitShell as e:
            return e.status
        except KeyboardInterrupt:
            print()
