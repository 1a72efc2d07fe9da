from __future__ import annotations

import os
from typing import List, Optional

from .errors import ConfigError, EntryNotFoundError


# A project checked out with the tool under scripts/ is analyzed from its parent
SCRIPTS_DIR = "scripts"


def resolve_entry_file(path: str) -> str:
	if not path:
		raise ConfigError("entry file path is required")
	try:
		abs_path = os.path.abspath(path)
	except OSError as e:
		raise ConfigError(f"cannot resolve absolute path of {path}: {e}") from e
	if not os.path.exists(abs_path):
		raise EntryNotFoundError(abs_path)
	return abs_path


def resolve_project_root(root: Optional[str] = None) -> str:
	try:
		project_root = os.path.abspath(root) if root else os.getcwd()
	except OSError as e:
		raise ConfigError(f"cannot determine current directory: {e}") from e
	if not os.path.isdir(project_root):
		raise ConfigError(f"project root is not a directory: {project_root}")
	if os.path.basename(project_root) == SCRIPTS_DIR:
		project_root = os.path.dirname(project_root)
	return project_root


def is_test_file(filename: str, test_suffix: str = "_test.go") -> bool:
	return filename.endswith(test_suffix)


def list_package_sources(
	directory: str,
	source_suffix: str = ".go",
	test_suffix: str = "_test.go",
) -> List[str]:
	"""Immediate non-test source files of a package directory, sorted by name.

	A path that does not exist or is not a directory has nothing to list.
	"""
	if not os.path.isdir(directory):
		return []
	try:
		names = os.listdir(directory)
	except OSError:
		return []
	files: List[str] = []
	for filename in sorted(names):
		if not filename.endswith(source_suffix) or is_test_file(filename, test_suffix):
			continue
		path = os.path.join(directory, filename)
		if os.path.isfile(path):
			files.append(path)
	return files
