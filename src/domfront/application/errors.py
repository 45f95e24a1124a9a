"""
Error handling for domfront analyses.

This module defines the exception classes raised while building dominator
trees and dominance frontiers. All of them derive from DominanceError so a
caller can catch the whole family at once.

Missing exits and unreachable nodes are not errors: they are represented in
the results (empty post-dominance map, None immediate dominator).
"""


class DominanceError(Exception):
    """
    Base class for every error raised by domfront.
    """
    pass


class InvalidEntryError(DominanceError, KeyError):
    """
    Exception raised when the entry node is not a vertex of the graph.

    This is a precondition violation detected before any algorithmic work
    starts. It also derives from KeyError since the entry is used as a key
    into the graph's vertex set.
    """

    def __init__(self, entry):
        self.entry = entry
        super().__init__("entry %r is not a vertex of the graph" % (entry,))

    def __str__(self):
        # KeyError quotes its argument, keep the message readable.
        return self.args[0]


class MissingExitError(DominanceError):
    """
    Exception raised when the exit of a graph is requested but the graph
    has no designated exit.
    """
    pass


class GraphError(DominanceError):
    """
    Exception raised for malformed graph construction.

    Examples are using None as a vertex, wrapping an undirected graph, or
    designating an entry or exit that is not part of the graph.
    """
    pass


class ConfigError(DominanceError, ValueError):
    """
    Exception raised for unknown configuration options or invalid values.
    """
    pass


class InternalError(DominanceError):
    """
    Exception raised for internal errors in domfront.

    This indicates a broken algorithm invariant, as opposed to an error in
    the caller's input.
    """
    pass
