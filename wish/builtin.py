import logging
import os

from wish.errors import BuiltinError, ExitShell

logger = logging.getLogger(__name__)


def builtin_exit(session, args):
    """Leave the shell; takes no arguments"""
    if args:
        raise BuiltinError(f"exit: expected no arguments, got {len(args)}")
    raise ExitShell(0)


def builtin_cd(session, args):
    """Change directory to exactly one target"""
    if len(args) != 1:
        raise BuiltinError(f"cd: expected one argument, got {len(args)}")
    try:
        os.chdir(args[0])
    except OSError as e:
        raise BuiltinError(f"cd: {e}") from e
    logger.debug("cwd is now %s", os.getcwd())
    return 0


def builtin_path(session, args):
    """Replace the search path; no arguments clears it"""
    session.search_path.replace(args)
    return 0


BUILTINS = {
    'exit': builtin_exit,
    'cd': builtin_cd,
    'path': builtin_path,
}


def execute_builtin(spec, session):
    """
    Run a built-in in the shell's own process if the command names one.
    Redirect targets are ignored: built-ins never write to stdout.
    Returns: (executed: bool, exit_code: int)
    Raises: BuiltinError on misuse, ExitShell from `exit`
    """
    handler = BUILTINS.get(spec.name)
    if handler is None:
        return False, 0

    logger.debug("builtin %s %s", spec.name, list(spec.args))
    return True, handler(session, list(spec.args))
