"""
Runtime configuration.

Values come from GODEPS_* environment variables or a local .env file;
command-line flags override them.
"""

from __future__ import annotations

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	model_config = SettingsConfigDict(
		env_prefix="GODEPS_",
		env_file=".env",
		env_file_encoding="utf-8",
		extra="ignore",
	)

	# Defaults to the working directory when unset
	project_root: Optional[str] = None

	# Namespace treated as internal when go.mod has no module line
	legacy_prefix: str = "xiaoiron.com/admin"

	source_suffix: str = ".go"
	test_suffix: str = "_test.go"

	skip_unparsable: bool = False

	log_level: str = "WARNING"

	host: str = "127.0.0.1"
	port: int = 8000
