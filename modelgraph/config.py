from __future__ import annotations

from functools import lru_cache
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .fs_scan import DEFAULT_EXCLUDE_DIRS, DEFAULT_MODEL_GLOBS


class Settings(BaseSettings):
	"""Scanner and server settings, read from MODELGRAPH_* variables or `.env`."""

	model_config = SettingsConfigDict(
		env_prefix="MODELGRAPH_",
		env_file=".env",
		env_file_encoding="utf-8",
		extra="ignore",
	)

	# Discovery
	candidate_globs: List[str] = Field(default_factory=lambda: list(DEFAULT_MODEL_GLOBS))
	exclude_dirs: List[str] = Field(default_factory=lambda: list(DEFAULT_EXCLUDE_DIRS))
	encoding: str = "utf-8"
	max_workers: Optional[int] = None

	# Logging
	log_level: str = "INFO"
	log_file: Optional[str] = None

	# Server
	host: str = "127.0.0.1"
	port: int = 8000


@lru_cache(maxsize=1)
def get_settings() -> Settings:
	return Settings()
