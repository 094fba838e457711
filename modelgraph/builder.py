from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional, Set, Tuple

from loguru import logger

from .config import Settings, get_settings
from .errors import ClassPatternNotFound, FileUnreadable
from .fs_scan import find_model_files, read_source
from .model import ModelGraph, ModelNode, ParsedModel, RelationshipEdge
from .php_parse import build_import_table, extract_class_identity, extract_relationships
from .resolve import resolve_target


def parse_model_source(text: str, path: str) -> ParsedModel:
	"""Extract one file's model node and its outgoing relationship edges.

	Raises ClassPatternNotFound when the file declares no namespaced class.
	"""
	identity = extract_class_identity(text)
	imports = build_import_table(text)
	class_id = identity.fqcn

	edges: List[RelationshipEdge] = []
	for rel in extract_relationships(text):
		edges.append(
			RelationshipEdge(
				from_=class_id,
				to=resolve_target(rel.target, identity.namespace, imports),
				relation_name=rel.method,
				relation_kind=rel.kind,
			)
		)
	return ParsedModel(
		node=ModelNode(id=class_id, label=identity.name, source_path=path),
		edges=edges,
	)


def build_graph_from_sources(sources: Iterable[Tuple[str, str]]) -> ModelGraph:
	nodes: List[ModelNode] = []
	edges: List[RelationshipEdge] = []
	seen: Set[str] = set()

	for path, text in sources:
		try:
			parsed = parse_model_source(text, path)
		except ClassPatternNotFound as e:
			logger.debug(f"No model class in {path}: {e}")
			continue

		if parsed.node.id in seen:
			logger.warning(f"{parsed.node.id} declared again in {path}; keeping the first node")
		else:
			seen.add(parsed.node.id)
			nodes.append(parsed.node)
		edges.extend(parsed.edges)

	return ModelGraph(nodes=nodes, edges=edges)


def _read_sources(paths: List[str], encoding: str, max_workers: Optional[int]) -> List[Tuple[str, str]]:
	def load(path: str) -> Optional[str]:
		try:
			return read_source(path, encoding)
		except FileUnreadable as e:
			logger.warning(f"Skipping file: {e}")
			return None

	if max_workers and max_workers > 1 and len(paths) > 1:
		# map() keeps candidate order regardless of completion order
		with ThreadPoolExecutor(max_workers=max_workers) as executor:
			texts = list(executor.map(load, paths))
	else:
		texts = [load(p) for p in paths]

	return [(path, text) for path, text in zip(paths, texts) if text is not None]


def build_graph(
	paths: Iterable[str],
	max_workers: Optional[int] = None,
	encoding: str = "utf-8",
) -> ModelGraph:
	"""Build the model graph for a list of candidate files.

	Unreadable files and files without a namespaced class are skipped; the
	scan always completes. An empty result is a valid graph.
	"""
	candidates = [os.path.abspath(p) for p in paths]
	graph = build_graph_from_sources(_read_sources(candidates, encoding, max_workers))
	logger.info(
		f"Scanned {len(candidates)} files: {len(graph.nodes)} models, {len(graph.edges)} relationships"
	)
	return graph


def scan_project(root: str, settings: Optional[Settings] = None) -> ModelGraph:
	settings = settings or get_settings()
	files = find_model_files(root, settings.candidate_globs, settings.exclude_dirs)
	if not files:
		logger.info(f"No candidate model files under {root}")
	return build_graph(files, max_workers=settings.max_workers, encoding=settings.encoding)
