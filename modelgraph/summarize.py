from __future__ import annotations

from collections import Counter
from typing import Dict, List, Optional

from .model import NAMESPACE_SEPARATOR, GraphSummary, ModelGraph


def summarize_model(graph: ModelGraph, model_id: str) -> str:
	parts: List[str] = [f"Model {model_id}"]
	for e in graph.edges:
		if e.from_ == model_id:
			parts.append(f"  {e.relation_name}: {e.relation_kind.value} -> {e.to}")
	return "\n".join(parts)


def summarize_graph(graph: ModelGraph, root: Optional[str] = None) -> GraphSummary:
	per_kind: Dict[str, int] = dict(Counter(e.relation_kind.value for e in graph.edges))
	per_namespace: Dict[str, int] = dict(
		Counter(n.id.rsplit(NAMESPACE_SEPARATOR, 1)[0] for n in graph.nodes)
	)

	where = f" in {root}" if root else ""
	overview = f"{len(graph.nodes)} models, {len(graph.edges)} relationships{where}"

	message = None
	if graph.is_empty:
		message = f"No models found{where}. Models are expected under 'app/Models/' or 'app/'."

	return GraphSummary(
		overview=overview,
		per_kind=dict(sorted(per_kind.items())),
		per_namespace=dict(sorted(per_namespace.items())),
		message=message,
	)
