"""
Configuration for dominance analyses.

DominanceConfig holds the options that shape an analysis call: which
dominator tree algorithm to run, whether nodes with an empty frontier are
kept in the result, and whether the analysis phases are timed.
"""

from domfront.application.errors import ConfigError
from domfront.util.graphalgorithim.dominator import ALGORITHMS, LENGAUER_TARJAN


class DominanceConfig(object):
    """
    Options for a dominance analysis.

    Attributes:
        algorithm: Dominator tree algorithm, "lengauer-tarjan" or "iterative"
        prune_empty: If True, nodes with an empty frontier are left out of
            frontier maps. By default every vertex is a key.
        verbose: If True, analysis phases are timed and reported at INFO level
    """

    _defaults = {
        "algorithm": LENGAUER_TARJAN,
        "prune_empty": False,
        "verbose": False,
    }

    def __init__(self, **options):
        for name, value in self._defaults.items():
            setattr(self, name, value)
        for name, value in options.items():
            self.set_option(name, value)

    @classmethod
    def from_mapping(cls, mapping):
        """
        Build a config from a mapping of option names to values.

        Args:
            mapping: Mapping of option name to value

        Returns:
            DominanceConfig: The new config

        Raises:
            ConfigError: If an option is unknown or a value is invalid
        """
        return cls(**dict(mapping))

    def set_option(self, name, value):
        """
        Set a single option after validating it.

        Raises:
            ConfigError: If the option is unknown or the value is invalid
        """
        if name not in self._defaults:
            raise ConfigError("unknown option %r" % (name,))

        if name == "algorithm":
            if value not in ALGORITHMS:
                raise ConfigError(
                    "algorithm must be one of %s, got %r" % (", ".join(ALGORITHMS), value)
                )
        elif not isinstance(value, bool):
            raise ConfigError("option %r expects a bool, got %r" % (name, value))

        setattr(self, name, value)

    def get_option(self, name):
        if name not in self._defaults:
            raise ConfigError("unknown option %r" % (name,))
        return getattr(self, name)

    def as_dict(self):
        return {name: getattr(self, name) for name in self._defaults}

    def __repr__(self):
        options = ", ".join("%s=%r" % item for item in self.as_dict().items())
        return "DominanceConfig(%s)" % options
