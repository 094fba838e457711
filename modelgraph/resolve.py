from __future__ import annotations

from typing import Dict

from .model import NAMESPACE_SEPARATOR
from .php_parse import last_segment


def resolve_target(raw: str, namespace: str, imports: Dict[str, str]) -> str:
	"""Turn a `Target` from `Target::class` into a fully qualified class name.

	Rooted names are taken as written, then the file's imports are consulted
	by short name, and anything else is assumed to share the declaring
	class's namespace. The result is a guess; it is never checked against the
	scanned models.
	"""
	if raw.startswith(NAMESPACE_SEPARATOR):
		return raw[len(NAMESPACE_SEPARATOR):]
	bare = last_segment(raw)
	if bare in imports:
		return imports[bare]
	return f"{namespace}{NAMESPACE_SEPARATOR}{bare}"
