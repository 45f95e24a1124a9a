"""
Dominance information dumping and diagnostic summaries.

This module turns immediate-dominator and frontier maps into human-readable
summaries (used by the analysis' debug logging) and dumps them to files.

**Supported Formats:**
- Text: immediate dominators followed by frontiers, one node per line
- DOT: Graphviz graph with the graph's edges solid, dominator tree edges
  dashed and frontier edges dotted
- JSON: machine-readable form of the same information

Vertices are written with a label function (str by default). The DOT and JSON
outputs refer to vertices by their position in the graph's vertex order, so
vertices whose labels collide stay distinct.
"""

import json
import logging
import os
from typing import List

from domfront.application.errors import ConfigError
from domfront.graph.indexing import VertexIndex
from domfront.util.io import dot
from domfront.util.io.formatting import nodeSet

LOG = logging.getLogger(__name__)

FORMATS = ("text", "dot", "json")

graphEdge = dot.Style(color="black")
treeEdge = dot.Style(style="dashed", color="blue")
frontierEdge = dot.Style(style="dotted", color="red", constraint="false")


def format_idoms(idoms, label=str) -> List[str]:
    """
    One line per vertex describing its immediate dominator.
    """
    lines = []
    for v, d in idoms.items():
        if d is not None:
            lines.append("%s is the immediate dominator of %s" % (label(d), label(v)))
        else:
            lines.append("%s is not dominated by anyone!" % (label(v),))
    return lines


def format_frontiers(frontiers, label=str) -> List[str]:
    """
    One line per node in the form "n={a;b;}".
    """
    return ["%s=%s" % (label(n), nodeSet(df, label)) for n, df in frontiers.items()]


class DominanceDumper(object):
    """
    Dumps the result of a dominance analysis.

    Attributes:
        graph: The analysed graph
        idoms: Immediate-dominator map of the graph
        frontiers: Frontier map of the graph
        label: Function turning a vertex into display text
    """

    def __init__(self, graph, idoms, frontiers, label=str):
        self.graph = graph
        self.idoms = idoms
        self.frontiers = frontiers
        self.label = label
        self.index = VertexIndex(graph)

    def to_dict(self, title=""):
        """
        Plain data form of the analysis, as written by dump_json.
        """
        index = self.index
        return {
            "title": title,
            "vertices": [{"id": i, "label": self.label(v)} for i, v in enumerate(index)],
            "entry": index[self.graph.entry],
            "idoms": {
                str(index[v]): (index[d] if d is not None else None)
                for v, d in self.idoms.items()
            },
            "frontiers": {
                str(index[n]): [index[m] for m in df] for n, df in self.frontiers.items()
            },
        }

    def dump_text(self, output_file, title=""):
        with open(output_file, "w") as f:
            heading = "Dominance%s" % (": %s" % title if title else "")
            f.write("%s\n%s\n\n" % (heading, "=" * 60))

            f.write("Immediate Dominators:\n%s\n" % ("-" * 40))
            f.writelines("  %s\n" % line for line in format_idoms(self.idoms, self.label))

            f.write("\nDominance Frontiers:\n%s\n" % ("-" * 40))
            f.writelines(
                "  %s\n" % line for line in format_frontiers(self.frontiers, self.label)
            )

    def dump_json(self, output_file, title=""):
        with open(output_file, "w") as f:
            json.dump(self.to_dict(title), f, indent=2)

    def to_dot(self, title=""):
        index = self.index
        g = dot.Digraph(title or "dominance")

        for i, v in enumerate(index):
            shape = "doublecircle" if v == self.graph.entry else "ellipse"
            g.node("n%d" % i, label=self.label(v), shape=shape)

        for e in self.graph.edges():
            g.edge("n%d" % index[e.source], "n%d" % index[e.target], **graphEdge)

        for v, d in self.idoms.items():
            if d is not None:
                g.edge("n%d" % index[d], "n%d" % index[v], **treeEdge)

        for n, df in self.frontiers.items():
            for m in df:
                g.edge("n%d" % index[n], "n%d" % index[m], **frontierEdge)

        return g

    def dump_dot(self, output_file, title=""):
        self.to_dot(title).createDotFile(output_file)


def dump_dominance(dumper, output_file, format="text", title=""):
    """
    Dump dominance information in one of the supported formats.

    Raises:
        ConfigError: If the format is not supported
    """
    if format not in FORMATS:
        raise ConfigError("Unsupported format: %s" % (format,))
    getattr(dumper, "dump_%s" % format)(output_file, title)


def dump_dominance_to_directory(dumper, directory, name, formats=None):
    """
    Dump dominance information in several formats into a directory.

    Creates the directory if needed. Files are named "<name>_dominance.<fmt>".

    Returns:
        list: Paths of the written files
    """
    formats = formats or list(FORMATS)
    os.makedirs(directory, exist_ok=True)

    written = []
    for fmt in formats:
        output_file = os.path.join(directory, "%s_dominance.%s" % (name, fmt))
        dump_dominance(dumper, output_file, fmt, name)
        LOG.info("dominance dumped to: %s", output_file)
        written.append(output_file)
    return written
