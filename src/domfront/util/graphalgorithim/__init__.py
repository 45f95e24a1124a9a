"""
Graph algorithms for control flow analysis.

- basic.py: depth-first spanning tree over the Graph capability
- dominator.py: Lengauer-Tarjan and iterative immediate dominators
"""
