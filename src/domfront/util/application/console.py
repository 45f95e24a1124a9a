"""
Console output and timing utilities for analysis phases.

This module provides a hierarchical console with timing capabilities,
allowing structured reporting of analysis phases with nested scopes and
elapsed time tracking. Output goes through the logging module: INFO when
the console is verbose, DEBUG otherwise.
"""

import logging
import time

from domfront.util.io import formatting

LOG = logging.getLogger(__name__)


class Scope(object):
    """Represents a hierarchical scope for timing.

    Attributes:
        parent: Parent scope, or None for root scope.
        name: Name of this scope.
    """

    def __init__(self, parent, name):
        self.parent = parent
        self.name = name
        self._start = None
        self._end = None

    def begin(self):
        """Start timing this scope."""
        self._start = time.perf_counter()

    def end(self):
        """Stop timing this scope."""
        self._end = time.perf_counter()

    @property
    def elapsed(self):
        """Elapsed time in seconds between begin() and end()."""
        return self._end - self._start

    def path(self):
        """Tuple of scope names from root to this scope."""
        if self.parent is None:
            return ()
        else:
            return self.parent.path() + (self.name,)

    def child(self, name):
        return Scope(self, name)


class ConsoleScopeManager(object):
    """Context manager for console scopes.

    Example:
        with console.scope("dominator tree"):
            ...
    """

    __slots__ = "console", "name"

    def __init__(self, console, name):
        self.console = console
        self.name = name

    def __enter__(self):
        self.console.begin(self.name)

    def __exit__(self, type, value, tb):
        self.console.end()


class Console(object):
    """Hierarchical console with timing and scoping.

    Attributes:
        root: Root scope of the hierarchy.
        current: Currently active scope.
        verbose: If True, messages are logged at INFO level instead of DEBUG.
        history: Finished scopes as (path, elapsed seconds) pairs.
    """

    def __init__(self, verbose=False, logger=None):
        self.logger = logger if logger is not None else LOG

        self.root = Scope(None, "root")
        self.current = self.root

        self.verbose = verbose
        self.history = []

    def path(self):
        """Formatted path of the current scope, e.g. "[ dominance | frontier ]"."""
        return "[ %s ]" % " | ".join(self.current.path())

    def begin(self, name):
        scope = self.current.child(name)
        scope.begin()
        self.current = scope

        self.output("begin %s" % self.path())

    def end(self):
        self.current.end()
        self.output(
            "end   %s %s" % (self.path(), formatting.elapsedTime(self.current.elapsed))
        )
        self.history.append((self.current.path(), self.current.elapsed))
        self.current = self.current.parent

    def scope(self, name):
        return ConsoleScopeManager(self, name)

    def output(self, s):
        level = logging.INFO if self.verbose else logging.DEBUG
        self.logger.log(level, s)
