from __future__ import annotations

import logging
import os
from typing import Dict, List, Optional, Set

from .classify import classify_package, matched_root
from .config import Settings
from .errors import ParseError
from .fs_scan import list_package_sources, resolve_entry_file, resolve_project_root
from .go_parse import extract_imports
from .gomod import read_module_root
from .model import (
	AnalyzeResult,
	Category,
	CategoryFilter,
	ClassifiedPackages,
	ProjectContext,
)


logger = logging.getLogger(__name__)


class DependencyAnalyzer:
	"""Walks Go files from an entry point and sorts their imports into categories.

	One instance holds the state of one run: the visited imports, the visited
	files and the three category sets. Each import is classified once and each
	file is parsed once, however often they are reached.
	"""

	def __init__(
		self,
		project_root: str,
		module_root: Optional[str] = None,
		legacy_prefix: str = "",
		source_suffix: str = ".go",
		test_suffix: str = "_test.go",
		skip_unparsable: bool = False,
	):
		self.project_root = project_root
		self.module_root = read_module_root(project_root) if module_root is None else module_root
		self.legacy_prefix = legacy_prefix
		self.source_suffix = source_suffix
		self.test_suffix = test_suffix
		self.skip_unparsable = skip_unparsable

		self.visited_imports: Set[str] = set()
		self.visited_files: Set[str] = set()
		self.sets: Dict[Category, Set[str]] = {c: set() for c in Category}
		self.files: List[str] = []
		self.skipped_files: List[str] = []

	@classmethod
	def from_settings(cls, settings: Settings, project_root: str) -> "DependencyAnalyzer":
		return cls(
			project_root,
			legacy_prefix=settings.legacy_prefix,
			source_suffix=settings.source_suffix,
			test_suffix=settings.test_suffix,
			skip_unparsable=settings.skip_unparsable,
		)

	def classify(self, pkg: str) -> Optional[Category]:
		"""Record pkg on first sight and return its category; None if already seen."""
		if pkg in self.visited_imports:
			return None
		self.visited_imports.add(pkg)
		category = classify_package(pkg, self.module_root, self.legacy_prefix)
		self.sets[category].add(pkg)
		return category

	def package_dir(self, pkg: str) -> Optional[str]:
		root = matched_root(pkg, self.module_root, self.legacy_prefix)
		if root is None:
			return None
		rel = pkg[len(root) + 1:]
		return os.path.join(self.project_root, *rel.split("/")) if rel else self.project_root

	def _expand(self, pkg: str) -> List[str]:
		directory = self.package_dir(pkg)
		if directory is None or not os.path.isdir(directory):
			logger.debug("no package directory for %s", pkg)
			return []
		pending: List[str] = []
		for path in list_package_sources(directory, self.source_suffix, self.test_suffix):
			if path in self.visited_files:
				continue
			self.visited_files.add(path)
			pending.append(path)
		return pending

	def analyze(self, start_file: str, deep: bool = False) -> None:
		start = os.path.abspath(start_file)
		self.visited_files.add(start)
		stack = [start]
		while stack:
			path = stack.pop()
			try:
				imports = extract_imports(path)
			except ParseError as e:
				if path == start or not self.skip_unparsable:
					raise
				logger.warning("skipping %s: %s", path, e.cause)
				self.skipped_files.append(path)
				continue
			self.files.append(path)

			pending: List[str] = []
			for pkg in imports:
				category = self.classify(pkg)
				if deep and category is Category.INTERNAL:
					pending.extend(self._expand(pkg))
			# Reversed so the first discovered file is traversed next
			stack.extend(reversed(pending))
		logger.info(
			"analyzed %d files, %d distinct imports", len(self.files), len(self.visited_imports)
		)

	def packages(self) -> ClassifiedPackages:
		return ClassifiedPackages(
			stdlib=sorted(self.sets[Category.STDLIB]),
			third_party=sorted(self.sets[Category.THIRD_PARTY]),
			internal=sorted(self.sets[Category.INTERNAL]),
		)

	def context(self) -> ProjectContext:
		return ProjectContext(
			root=self.project_root,
			module_root=self.module_root,
			legacy_prefix=self.legacy_prefix,
		)


def run_analysis(
	entry_file: str,
	project_root: Optional[str] = None,
	deep: bool = False,
	category: CategoryFilter = CategoryFilter.ALL,
	settings: Optional[Settings] = None,
) -> AnalyzeResult:
	settings = settings or Settings()
	entry = resolve_entry_file(entry_file)
	root = resolve_project_root(project_root or settings.project_root)

	analyzer = DependencyAnalyzer.from_settings(settings, root)
	analyzer.analyze(entry, deep=deep)

	return AnalyzeResult(
		entry_file=entry,
		project=analyzer.context(),
		deep=deep,
		category=category,
		files=analyzer.files,
		skipped_files=analyzer.skipped_files,
		packages=analyzer.packages().filtered(category),
	)
