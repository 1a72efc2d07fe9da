from __future__ import annotations

from enum import Enum
from typing import List

from pydantic import BaseModel, computed_field

from .errors import InvalidFilterError


class Category(str, Enum):
	STDLIB = "stdlib"
	THIRD_PARTY = "third-party"
	INTERNAL = "internal"


class CategoryFilter(str, Enum):
	ALL = "all"
	STDLIB = "stdlib"
	THIRD_PARTY = "third-party"
	INTERNAL = "internal"

	@classmethod
	def parse(cls, value: str) -> "CategoryFilter":
		try:
			return cls(value)
		except ValueError:
			raise InvalidFilterError(value, [f.value for f in cls]) from None

	def admits(self, category: Category) -> bool:
		return self is CategoryFilter.ALL or self.value == category.value


class ClassifiedPackages(BaseModel):
	stdlib: List[str] = []
	third_party: List[str] = []
	internal: List[str] = []

	@computed_field  # type: ignore[misc]
	@property
	def total(self) -> int:
		return len(self.stdlib) + len(self.third_party) + len(self.internal)

	def of(self, category: Category) -> List[str]:
		if category is Category.STDLIB:
			return self.stdlib
		if category is Category.THIRD_PARTY:
			return self.third_party
		return self.internal

	def filtered(self, category_filter: CategoryFilter) -> "ClassifiedPackages":
		return ClassifiedPackages(
			stdlib=self.stdlib if category_filter.admits(Category.STDLIB) else [],
			third_party=self.third_party if category_filter.admits(Category.THIRD_PARTY) else [],
			internal=self.internal if category_filter.admits(Category.INTERNAL) else [],
		)


class ProjectContext(BaseModel):
	root: str
	module_root: str = ""
	legacy_prefix: str = ""


class AnalyzeResult(BaseModel):
	entry_file: str
	project: ProjectContext
	deep: bool
	category: CategoryFilter = CategoryFilter.ALL
	files: List[str] = []
	skipped_files: List[str] = []
	packages: ClassifiedPackages
