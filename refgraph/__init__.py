"""refgraph package.

Infers a dependency graph among source files by textual cross-reference
detection and renders it as a Graphviz DOT document.

Layout:

- refgraph/analysis  : identifiers, reference scanning, graph store,
                       transitive reduction, importance scoring
- refgraph/reporting : DOT renderer, node/edge decorators, text summary
- refgraph/core      : source listing and run pipeline
- refgraph/orchestration : logging helpers
"""

__version__ = "0.3.0"
