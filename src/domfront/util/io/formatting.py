"""
Formatting utilities for human-readable output.
"""


def elapsedTime(t):
    """
    Format a time duration in seconds as a human-readable string.

    Automatically selects the most appropriate unit:
    - Milliseconds for times < 1 second
    - Seconds for times < 1 minute
    - Minutes for times < 1 hour
    - Hours for times >= 1 hour

    Args:
        t: Time duration in seconds (float)

    Returns:
        Formatted string with appropriate unit (e.g., "123.4 ms", "45.6 s")
    """
    if t < 1.0:
        return "%5.4g ms" % (t * 1000.0)
    elif t < 60.0:
        return "%5.4g s" % (t)
    elif t < 3600.0:
        return "%5.4g m" % (t / 60.0)
    else:
        return "%5.4g h" % (t / 3600.0)


def nodeSet(nodes, label=str):
    """
    Format a collection of nodes the way frontier summaries print them.

    Example:
        nodeSet(["B", "C"]) -> "{B;C;}"
    """
    return "{%s}" % "".join("%s;" % label(n) for n in nodes)
