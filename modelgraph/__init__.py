"""Package for extracting an Eloquent model relationship graph from a Laravel codebase.

Modules:
- fs_scan.py: Discovery of candidate model files and source reading.
- php_parse.py: Lexical extraction of namespace, class, imports and relationships.
- resolve.py: Resolution of relationship targets to fully qualified class names.
- builder.py: Per-file parsing and whole-scan graph accumulation.
- model.py: Data structures for models, relationships and the graph payload.
- summarize.py: Deterministic textual summarization of a graph.
"""

from .builder import build_graph, parse_model_source, scan_project
from .model import ModelGraph, ModelNode, RelationKind, RelationshipEdge

__all__ = [
	"build_graph",
	"parse_model_source",
	"scan_project",
	"ModelGraph",
	"ModelNode",
	"RelationKind",
	"RelationshipEdge",
]
