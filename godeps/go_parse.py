from __future__ import annotations

import codecs
import logging
from typing import List

import tree_sitter
from tree_sitter_go import language

from .errors import ParseError


logger = logging.getLogger(__name__)

GO_LANGUAGE = tree_sitter.Language(language())


def _string_literal_value(node: tree_sitter.Node) -> str:
	raw = node.text or b""
	# Both "..." and `...` literals carry one delimiter on each side
	return raw[1:-1].decode("utf-8")


def _collect_import_paths(decl: tree_sitter.Node) -> List[str]:
	paths: List[str] = []
	stack = [decl]
	while stack:
		node = stack.pop()
		if node.type == "import_spec":
			path_node = node.child_by_field_name("path")
			if path_node is not None:
				paths.append(_string_literal_value(path_node))
			continue
		stack.extend(reversed(node.named_children))
	return paths


def parse_go_imports(path: str, source: bytes) -> List[str]:
	"""Import paths declared by one Go file, in source order.

	Only the package clause and the import declarations are checked for
	syntax errors; the rest of the file is not inspected.
	"""
	if source.startswith(codecs.BOM_UTF8):
		source = source[len(codecs.BOM_UTF8):]
	tree = tree_sitter.Parser(GO_LANGUAGE).parse(source)

	imports: List[str] = []
	seen_package = False
	for node in tree.root_node.children:
		if node.type == "comment" or (not node.is_named and not node.is_missing):
			continue
		if not seen_package:
			if node.type != "package_clause" or node.has_error:
				raise ParseError(path, "expected package clause")
			seen_package = True
			continue
		if node.type == "import_declaration":
			if node.has_error:
				raise ParseError(path, f"malformed import declaration at line {node.start_point[0] + 1}")
			try:
				imports.extend(_collect_import_paths(node))
			except UnicodeDecodeError as e:
				raise ParseError(path, e) from e
			continue
		if node.is_missing or (node.type == "ERROR" and (node.text or b"").lstrip().startswith(b"import")):
			raise ParseError(path, f"syntax error at line {node.start_point[0] + 1}")
		# First declaration after the imports ends the preamble
		break

	if not seen_package:
		raise ParseError(path, "expected package clause")
	return imports


def extract_imports(path: str) -> List[str]:
	try:
		with open(path, "rb") as fh:
			source = fh.read()
	except OSError as e:
		raise ParseError(path, e) from e
	imports = parse_go_imports(path, source)
	logger.debug("%s: %d imports", path, len(imports))
	return imports
