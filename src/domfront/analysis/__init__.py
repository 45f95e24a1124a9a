"""
Analyses built on the graph capability.
"""
