"""Lexical extraction of Eloquent model facts from PHP source.

This is pattern matching, not parsing. Known misses: relationships built
dynamically (string class names, concatenation, closures, conditional
branches), methods with parameters, and anything that is not spelled
`->kind(Target::class ...)` inside a public method.
"""

from __future__ import annotations

import re
from typing import Dict, List

from .errors import ClassPatternNotFound
from .model import NAMESPACE_SEPARATOR, ClassIdentity, RawRelationship, RelationKind


# A declaration starts a line or follows `<?php` / `;` on the same line.
_DECL_START = r"(?:^|(?<=<\?php)|(?<=;))[ \t]*"

NAMESPACE_RE = re.compile(_DECL_START + r"namespace\s+([\w\\]+)\s*;", re.MULTILINE)
CLASS_RE = re.compile(
	_DECL_START + r"(?:(?:abstract|final|readonly)\s+)*class\s+(\w+)\b", re.MULTILINE
)
USE_RE = re.compile(r"^\s*use\s+([^;]+);", re.MULTILINE)

# Longest kinds first so `hasOneThrough` is never read as `hasOne`.
_KIND_ALTERNATION = "|".join(
	sorted((k.value for k in RelationKind), key=len, reverse=True)
)

METHOD_RE = re.compile(
	r"public\s+function\s+(\w+)\s*\(\s*\)\s*(?::\s*\??[\\\w|]+\s*)?\{"
)
RELATION_CALL_RE = re.compile(
	r"->\s*(" + _KIND_ALTERNATION + r")\s*\(\s*([^\s,)]+)::class"
)


def last_segment(name: str) -> str:
	return name.split(NAMESPACE_SEPARATOR)[-1]


def extract_class_identity(text: str) -> ClassIdentity:
	ns_match = NAMESPACE_RE.search(text)
	if ns_match is None:
		raise ClassPatternNotFound("no namespace declaration")
	class_match = CLASS_RE.search(text, ns_match.end())
	if class_match is None:
		raise ClassPatternNotFound("no class declaration after namespace")
	return ClassIdentity(namespace=ns_match.group(1), name=class_match.group(1))


def build_import_table(text: str) -> Dict[str, str]:
	"""Map the short name of every `use` declaration to its full path.

	A later declaration of the same short name replaces the earlier one.
	Rename clauses (`use A\\B as C;`) are not understood: the alias keeps the
	raw text after the last backslash and will not match a bare reference.
	"""
	table: Dict[str, str] = {}
	for match in USE_RE.finditer(text):
		full_path = match.group(1).strip()
		alias = last_segment(full_path)
		if alias:
			table[alias] = full_path
	return table


def _skip_string(text: str, start: int, limit: int) -> int:
	quote = text[start]
	i = start + 1
	while i < limit:
		if text[i] == "\\":
			i += 2
		elif text[i] == quote:
			return i + 1
		else:
			i += 1
	return limit


def _body_end(text: str, open_pos: int, limit: int) -> int:
	"""Index just past the brace closing the body opened at `open_pos`.

	Braces inside quoted strings and comments are not counted. An unterminated
	body runs to `limit`.
	"""
	depth = 0
	i = open_pos
	while i < limit:
		ch = text[i]
		if ch in "'\"":
			i = _skip_string(text, i, limit)
			continue
		if text.startswith("/*", i):
			end = text.find("*/", i + 2, limit)
			i = limit if end == -1 else end + 2
			continue
		if ch == "#" or text.startswith("//", i):
			end = text.find("\n", i, limit)
			i = limit if end == -1 else end + 1
			continue
		if ch == "{":
			depth += 1
		elif ch == "}":
			depth -= 1
			if depth == 0:
				return i + 1
		i += 1
	return limit


def extract_relationships(text: str) -> List[RawRelationship]:
	relationships: List[RawRelationship] = []
	methods = list(METHOD_RE.finditer(text))
	for idx, method in enumerate(methods):
		# A body never reaches into the next method header.
		limit = methods[idx + 1].start() if idx + 1 < len(methods) else len(text)
		open_pos = method.end() - 1
		body = text[open_pos:_body_end(text, open_pos, limit)]
		for call in RELATION_CALL_RE.finditer(body):
			relationships.append(
				RawRelationship(
					method=method.group(1),
					kind=RelationKind(call.group(1)),
					target=call.group(2),
				)
			)
	return relationships
