from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List, Set

from .errors import FileUnreadable, ScanRootNotFound


DEFAULT_MODEL_GLOBS: List[str] = ["app/Models/**/*.php", "app/*.php"]
DEFAULT_EXCLUDE_DIRS: List[str] = ["vendor", "node_modules", ".git"]


def find_model_files(
	root: str,
	patterns: Iterable[str] = DEFAULT_MODEL_GLOBS,
	exclude_dirs: Iterable[str] = DEFAULT_EXCLUDE_DIRS,
) -> List[str]:
	if not os.path.isdir(root):
		raise ScanRootNotFound(root)
	base = Path(os.path.abspath(root))
	excluded = set(exclude_dirs)

	found: Set[str] = set()
	for pattern in patterns:
		for path in base.glob(pattern):
			# Directories between the root and the file, never the file name itself
			if not path.is_file() or excluded.intersection(path.relative_to(base).parts[:-1]):
				continue
			found.add(str(path))
	return sorted(found)


def read_source(path: str, encoding: str = "utf-8") -> str:
	try:
		with open(path, "r", encoding=encoding) as fh:
			return fh.read()
	except (OSError, UnicodeDecodeError) as e:
		raise FileUnreadable(path, str(e)) from e
