from __future__ import annotations


class ModelGraphError(Exception):
	"""Base class for scan failures."""


class FileUnreadable(ModelGraphError):
	def __init__(self, path: str, reason: str):
		super().__init__(f"Cannot read {path}: {reason}")
		self.path = path
		self.reason = reason


class ClassPatternNotFound(ModelGraphError):
	"""The text has no `namespace ...;` followed by a `class ...` declaration."""


class ScanRootNotFound(ModelGraphError):
	def __init__(self, root: str):
		super().__init__(f"Invalid project root: {root}")
		self.root = root
