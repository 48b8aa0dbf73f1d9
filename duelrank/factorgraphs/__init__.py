"""
Factor Graphs
=============

Variables, messages and the factor base class used for TrueSkill-style inference.
Only single message updates live here; scheduling passes over a whole graph is left
to whoever builds the graph.
"""
