"""Sankey layout pipeline.

Modules, in pipeline order: validation, graph, layers, ordering,
positioning, routing. The engine module ties them together; band and
hit_test answer point queries against the result.
"""
