from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

from loguru import logger


def setup_logging(log_level: str = "INFO", log_file: Optional[str] = None):
	"""Route loguru output to stderr and, optionally, a rotating file."""
	logger.remove()

	# stderr keeps stdout free for the JSON graph
	logger.add(
		sys.stderr,
		format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
		level=log_level,
		colorize=True,
	)

	if log_file:
		Path(log_file).parent.mkdir(parents=True, exist_ok=True)
		logger.add(
			log_file,
			format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
			level=log_level,
			rotation="10 MB",
			retention="30 days",
			compression="zip",
		)

	return logger
