import errno
import logging
from dataclasses import dataclass

import psutil

from wish.builtin import execute_builtin
from wish.errors import BuiltinError, report_error
from wish.job_control import ProcessTable

logger = logging.getLogger(__name__)

# exec errors that just mean "not this candidate, try the next directory"
_TRY_NEXT = {errno.ENOENT, errno.EACCES, errno.ENOTDIR, errno.ENOEXEC, errno.EISDIR}


@dataclass
class Spawned:
    handle: object


@dataclass
class NotFound:
    name: str


@dataclass
class LaunchFailed:
    reason: str


def _open_redirect(path):
    """Open an output target for writing, creating or truncating it."""
    return open(path, "wb")


def launch(spec, session, spawn=psutil.Popen):
    """
    Start one external command.
    The redirect target is opened (and truncated) before the search, and
    only the child's stdout points at it. Each search path candidate is
    tried in order; the first one that executes wins.
    Returns: Spawned, NotFound or LaunchFailed
    """
    stdout = None
    if spec.redirect is not None:
        try:
            stdout = _open_redirect(spec.redirect)
        except OSError as e:
            return LaunchFailed(f"cannot open {spec.redirect}: {e.strerror}")

    try:
        for candidate in session.search_path.candidates(spec.name):
            try:
                proc = spawn(list(spec.argv), executable=candidate, stdout=stdout)
            except OSError as e:
                if e.errno in _TRY_NEXT:
                    logger.debug("%s: %s", candidate, e.strerror)
                    continue
                return LaunchFailed(f"{candidate}: {e}")
            logger.debug("launched %s as pid %d", candidate, proc.pid)
            return Spawned(proc)
        return NotFound(spec.name)
    finally:
        # the child holds its own copy of the descriptor
        if stdout is not None:
            stdout.close()


def execute_batch(batch, session, spawn=psutil.Popen):
    """
    Run every command of one line, left to right.
    Built-ins run in place as they come up, so a `cd` only affects the
    commands launched after it. External commands are all started before
    any is waited on; a failure is reported for that command alone.
    Returns: {pid: returncode} for the launched processes
    Raises: ExitShell from `exit`, without waiting for anything already running
    """
    table = ProcessTable()

    for spec in batch:
        try:
            executed, _ = execute_builtin(spec, session)
        except BuiltinError as e:
            logger.debug("%s", e)
            report_error(session.stderr)
            continue
        if executed:
            continue

        outcome = launch(spec, session, spawn=spawn)
        if isinstance(outcome, Spawned):
            table.add(outcome.handle, " ".join(spec.argv))
        elif isinstance(outcome, NotFound):
            logger.debug("%s: not found in %s", outcome.name, session.search_path)
            report_error(session.stderr)
        else:
            logger.debug("launch failed: %s", outcome.reason)
            report_error(session.stderr)

    return table.wait_all()
