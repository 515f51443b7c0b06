#!/usr/bin/env python3
import logging
import sys

from wish.config import LOG_LEVEL
from wish.errors import report_error
from wish.shell import ShellSession, main_loop, run_batch


def setup_logging():
    logging.basicConfig(
        level=LOG_LEVEL,
        stream=sys.stderr,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )


def main(argv=None):
    """wish [batch-file]"""
    argv = sys.argv[1:] if argv is None else argv
    setup_logging()

    if len(argv) > 1:
        report_error()
        return 1

    session = ShellSession()
    if not argv:
        return main_loop(session)

    try:
        # undecodable bytes pass through to exec unchanged
        script = open(argv[0], errors="surrogateescape")
    except OSError as e:
        logging.getLogger(__name__).debug("cannot open %s: %s", argv[0], e)
        report_error()
        return 1
    with script:
        return run_batch(session, script)


if __name__ == "__main__":
    sys.exit(main())
