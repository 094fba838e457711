from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


NAMESPACE_SEPARATOR = "\\"


class RelationKind(str, Enum):
	HAS_ONE = "hasOne"
	HAS_MANY = "hasMany"
	BELONGS_TO = "belongsTo"
	BELONGS_TO_MANY = "belongsToMany"
	MORPH_TO = "morphTo"
	MORPH_ONE = "morphOne"
	MORPH_MANY = "morphMany"
	MORPH_TO_MANY = "morphToMany"
	HAS_ONE_THROUGH = "hasOneThrough"
	HAS_MANY_THROUGH = "hasManyThrough"


class ClassIdentity(BaseModel):
	model_config = ConfigDict(frozen=True)

	namespace: str
	name: str

	@property
	def fqcn(self) -> str:
		return f"{self.namespace}{NAMESPACE_SEPARATOR}{self.name}"


class RawRelationship(BaseModel):
	"""A relationship call as written in the source, target not yet resolved."""

	model_config = ConfigDict(frozen=True)

	method: str
	kind: RelationKind
	target: str


class ModelNode(BaseModel):
	model_config = ConfigDict(frozen=True)

	id: str
	label: str
	source_path: str


class RelationshipEdge(BaseModel):
	model_config = ConfigDict(frozen=True, populate_by_name=True)

	from_: str = Field(alias="from")
	to: str
	relation_name: str
	relation_kind: RelationKind


class ParsedModel(BaseModel):
	"""One model file's contribution to the graph."""

	model_config = ConfigDict(frozen=True)

	node: ModelNode
	edges: List[RelationshipEdge] = []


class NodePayload(BaseModel):
	id: str
	label: str
	path: str
	title: str


class EdgePayload(BaseModel):
	model_config = ConfigDict(populate_by_name=True)

	from_: str = Field(alias="from")
	to: str
	label: str
	title: str


class GraphPayload(BaseModel):
	nodes: List[NodePayload] = []
	edges: List[EdgePayload] = []


class ModelGraph(BaseModel):
	"""Result of one scan: every discovered model and every relationship declared by them."""

	model_config = ConfigDict(frozen=True)

	nodes: List[ModelNode] = []
	edges: List[RelationshipEdge] = []

	@property
	def is_empty(self) -> bool:
		return not self.nodes

	def node_ids(self) -> List[str]:
		return [n.id for n in self.nodes]

	def to_payload(self) -> GraphPayload:
		"""Shape the graph the way the viewer consumes it (`from`/`to`/`label`/`title`)."""
		return GraphPayload(
			nodes=[
				NodePayload(id=n.id, label=n.label, path=n.source_path, title=f"Path: {n.source_path}")
				for n in self.nodes
			],
			edges=[
				EdgePayload(
					from_=e.from_,
					to=e.to,
					label=e.relation_name,
					title=f"Type: {e.relation_kind.value}",
				)
				for e in self.edges
			],
		)


class GraphSummary(BaseModel):
	overview: str
	per_kind: Dict[str, int]
	per_namespace: Dict[str, int]
	message: Optional[str] = None


class AnalyzeResult(BaseModel):
	graph: GraphPayload
	summary: GraphSummary
