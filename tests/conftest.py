from textwrap import dedent

import pytest


MODULE = "example.com/shop"


def go_file(package, *imports):
	lines = [f"package {package}", ""]
	if imports:
		lines.append("import (")
		lines.extend(f'\t"{imp}"' for imp in imports)
		lines.append(")")
		lines.append("")
	lines.append("func init() {}")
	return "\n".join(lines) + "\n"


@pytest.fixture
def go_project(tmp_path, monkeypatch):
	"""Lay out a Go project from {relative path: content} and return its root."""
	for var in ("GODEPS_PROJECT_ROOT", "GODEPS_SKIP_UNPARSABLE", "GODEPS_LEGACY_PREFIX"):
		monkeypatch.delenv(var, raising=False)

	def build(files, module=MODULE):
		if module is not None:
			(tmp_path / "go.mod").write_text(dedent(f"""\
				module {module}

				go 1.21
				"""))
		for rel, content in files.items():
			path = tmp_path / rel
			path.parent.mkdir(parents=True, exist_ok=True)
			path.write_text(content)
		return tmp_path

	return build
