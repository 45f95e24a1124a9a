"""
DOT graph output utilities.

This module provides a small set of classes for generating DOT files, which
can be rendered by Graphviz tools. Only directed graphs with nodes, edges and
attributes are supported.
"""

import re

__all__ = "Digraph", "Style", "escapeField"

# Regular expression for escaping special characters in DOT field values
makeescape = re.compile(r"[\n\t\"]")

# Lookup table for escaping special characters in DOT format
lut = {"\n": r"\n", "\t": r"\t", '"': r"\""}


def escapeField(s):
    """
    Escape newlines, tabs and double quotes for use as a DOT field value.

    Args:
        s: String to escape (will be converted to string if not already)
    """
    return makeescape.sub(lambda c: lut[c.group()], str(s))


def dumpAttr(attr, out):
    """
    Output attributes in DOT format, [key1="value1", key2="value2", ...].
    """
    out.write(" [")
    out.write(", ".join('%s="%s"' % (k, escapeField(v)) for k, v in attr.items()))
    out.write("]")


def Style(**kargs):
    """
    Create a style dictionary for nodes or edges.

    Raises:
        AssertionError: If any key or value is not a string
    """
    for k, v in kargs.items():
        assert type(k) == str and type(v) == str
    return kargs


class Node(object):
    __slots__ = ("name", "attr")

    def __init__(self, name, **attr):
        assert isinstance(name, str)
        self.name = name
        self.attr = attr

    def dump(self, out, tabs=""):
        out.write('%s"%s"' % (tabs, escapeField(self.name)))
        if self.attr:
            dumpAttr(self.attr, out)
        out.write(";\n")


class Edge(object):
    __slots__ = ("source", "target", "attr")

    def __init__(self, source, target, **attr):
        self.source = source
        self.target = target
        self.attr = attr

    def dump(self, out, tabs=""):
        out.write(
            '%s"%s" -> "%s"' % (tabs, escapeField(self.source), escapeField(self.target))
        )
        if self.attr:
            dumpAttr(self.attr, out)
        out.write(";\n")


class Digraph(object):
    """
    A directed graph that can output itself in DOT format.

    Nodes are kept in creation order; edges may only join nodes that were
    created first.
    """

    __slots__ = ("name", "attr", "nodes", "edges", "nameLUT")

    def __init__(self, name="G", **attr):
        self.name = name
        self.attr = attr
        self.nodes = []
        self.edges = []
        self.nameLUT = {}

    def node(self, name, **attr):
        name = str(name)
        assert name not in self.nameLUT, name
        n = Node(name, **attr)
        self.nodes.append(n)
        self.nameLUT[name] = n
        return n

    def edge(self, n1, n2, **attr):
        n1 = str(n1)
        n2 = str(n2)
        assert n1 in self.nameLUT, "Cannot find node " + n1
        assert n2 in self.nameLUT, "Cannot find node " + n2
        e = Edge(n1, n2, **attr)
        self.edges.append(e)
        return e

    def outputDot(self, out):
        indent = "\t"
        out.write('digraph "%s" {\n' % escapeField(self.name))

        for k, v in self.attr.items():
            out.write(indent + k + ' = "' + escapeField(v) + '"\n')

        for n in self.nodes:
            n.dump(out, indent)

        for e in self.edges:
            e.dump(out, indent)

        out.write("}\n")

    def createDotFile(self, fo):
        """
        Write the graph to a filename or an open file object.
        """
        if isinstance(fo, str):
            with open(fo, "w") as f:
                self.outputDot(f)
        else:
            self.outputDot(fo)
