from __future__ import annotations

from typing import Optional

from .model import Category


def is_stdlib(pkg: str) -> bool:
	# Ecosystem paths start with a domain-like segment; stdlib paths never do
	return "." not in pkg.split("/", 1)[0]


def is_under(pkg: str, root: str) -> bool:
	"""True when pkg is root itself or a package nested below it."""
	if not root:
		return False
	return pkg == root or pkg.startswith(root + "/")


def matched_root(pkg: str, module_root: str, legacy_prefix: str = "") -> Optional[str]:
	"""The project namespace pkg belongs to, or None for non-project packages.

	The legacy prefix only applies when no module root is known.
	"""
	if module_root:
		return module_root if is_under(pkg, module_root) else None
	if is_under(pkg, legacy_prefix):
		return legacy_prefix
	return None


def classify_package(pkg: str, module_root: str, legacy_prefix: str = "") -> Category:
	if is_stdlib(pkg):
		return Category.STDLIB
	if matched_root(pkg, module_root, legacy_prefix) is not None:
		return Category.INTERNAL
	return Category.THIRD_PARTY
