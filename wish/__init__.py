"""wish - a small command interpreter with search paths, output redirection
and parallel commands."""

__version__ = "0.1.0"
