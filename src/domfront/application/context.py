"""
Context management for domfront analyses.

An AnalysisContext bundles the configuration of one analysis call with the
console used to time its phases. Contexts are created per call and are never
shared between calls.
"""

from domfront.application.config import DominanceConfig
from domfront.util.application.console import Console


class AnalysisContext(object):
    """
    Context for one dominance analysis.

    Attributes:
        config: DominanceConfig driving the analysis
        console: Console used to time the analysis phases
    """

    def __init__(self, config=None, console=None):
        if config is None:
            config = DominanceConfig()
        self.config = config

        if console is None:
            console = Console(verbose=config.verbose)
        self.console = console


def makeContext(config_or_context=None):
    """
    Normalize the config argument of the public entry points.

    Accepts None, a DominanceConfig, a mapping of options, or an existing
    AnalysisContext (returned unchanged).
    """
    if isinstance(config_or_context, AnalysisContext):
        return config_or_context
    if config_or_context is None or isinstance(config_or_context, DominanceConfig):
        return AnalysisContext(config_or_context)
    return AnalysisContext(DominanceConfig.from_mapping(config_or_context))
