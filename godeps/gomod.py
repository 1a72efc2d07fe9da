from __future__ import annotations

import logging
import os


logger = logging.getLogger(__name__)

GO_MOD = "go.mod"


def parse_module_line(text: str) -> str:
	"""Return the module path declared in go.mod text, or "" when absent."""
	for line in text.splitlines():
		# Trailing comments are allowed after the module path
		stripped = line.split("//", 1)[0].strip()
		parts = stripped.split(None, 1)
		if len(parts) == 2 and parts[0] == "module":
			return parts[1].strip().strip('"`')
	return ""


def read_module_root(project_root: str) -> str:
	path = os.path.join(project_root, GO_MOD)
	try:
		with open(path, "r", encoding="utf-8") as fh:
			text = fh.read()
	except (OSError, UnicodeDecodeError) as e:
		logger.info("no readable %s under %s (%s); module root left empty", GO_MOD, project_root, e)
		return ""
	module_root = parse_module_line(text)
	if not module_root:
		logger.info("%s has no module directive", path)
	return module_root
