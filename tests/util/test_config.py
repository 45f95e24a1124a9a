import unittest

from domfront import ConfigError, DominanceConfig
from domfront.application.context import AnalysisContext, makeContext
from domfront.util.graphalgorithim import dominator


class TestDominanceConfig(unittest.TestCase):
    def testDefaults(self):
        config = DominanceConfig()
        self.assertEqual(config.algorithm, dominator.LENGAUER_TARJAN)
        self.assertFalse(config.prune_empty)
        self.assertFalse(config.verbose)
        self.assertEqual(
            config.as_dict(),
            {"algorithm": "lengauer-tarjan", "prune_empty": False, "verbose": False},
        )

    def testSetOption(self):
        config = DominanceConfig()
        config.set_option("algorithm", "iterative")
        config.set_option("prune_empty", True)
        self.assertEqual(config.get_option("algorithm"), "iterative")
        self.assertTrue(config.prune_empty)

    def testFromMapping(self):
        config = DominanceConfig.from_mapping({"verbose": True})
        self.assertTrue(config.verbose)
        self.assertIn("verbose=True", repr(config))

    def testInvalidValues(self):
        with self.assertRaises(ConfigError):
            DominanceConfig(algorithm="semi-nca")
        with self.assertRaises(ConfigError):
            DominanceConfig(prune_empty="yes")
        with self.assertRaises(ConfigError):
            DominanceConfig(cache=True)
        with self.assertRaises(ConfigError):
            DominanceConfig().get_option("cache")

    def testConfigErrorIsValueError(self):
        with self.assertRaises(ValueError):
            DominanceConfig(algorithm=None)


class TestAnalysisContext(unittest.TestCase):
    def testMakeContext(self):
        self.assertIsInstance(makeContext(None).config, DominanceConfig)

        config = DominanceConfig(verbose=True)
        context = makeContext(config)
        self.assertIs(context.config, config)
        self.assertTrue(context.console.verbose)

        self.assertIs(makeContext(context), context)
        self.assertTrue(makeContext({"prune_empty": True}).config.prune_empty)

    def testMakeContextValidates(self):
        with self.assertRaises(ConfigError):
            makeContext({"algorithm": "nope"})

    def testDefaultContext(self):
        context = AnalysisContext()
        self.assertFalse(context.console.verbose)
