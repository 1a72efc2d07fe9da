from __future__ import annotations

from typing import List

from .model import Category, CategoryFilter, ClassifiedPackages


RULE = "=" * 20
FOOTER = "=" * 51

SECTION_TITLES = {
	Category.STDLIB: ("📦", "Standard library"),
	Category.THIRD_PARTY: ("🌐", "Third-party"),
	Category.INTERNAL: ("🏠", "Internal"),
}


def _banner(title: str) -> str:
	return f"{RULE} {title} {RULE}"


def render_section(category: Category, pkgs: List[str], verbose: bool = False) -> List[str]:
	icon, title = SECTION_TITLES[category]
	lines = [f"{icon} {title} ({len(pkgs)}):"]
	marker = "✓ " if verbose else ""
	for pkg in sorted(pkgs):
		lines.append(f"  {marker}{pkg}")
	lines.append("")
	return lines


def render_statistics(packages: ClassifiedPackages, category_filter: CategoryFilter) -> List[str]:
	lines = [_banner("Statistics")]
	if category_filter is CategoryFilter.ALL:
		total = packages.total
		lines.append(f"Total: {total} packages")
		if total > 0:
			for category in Category:
				count = len(packages.of(category))
				lines.append(f"  - {SECTION_TITLES[category][1]}: {count} ({count / total * 100:.1f}%)")
	else:
		category = Category(category_filter.value)
		lines.append(f"{SECTION_TITLES[category][1]}: {len(packages.of(category))} packages")
	lines.append(FOOTER)
	return lines


def render_report(
	packages: ClassifiedPackages,
	verbose: bool = False,
	category_filter: CategoryFilter = CategoryFilter.ALL,
) -> str:
	lines: List[str] = ["", _banner("Dependency analysis"), ""]
	for category in Category:
		pkgs = packages.of(category)
		if pkgs and category_filter.admits(category):
			lines.extend(render_section(category, pkgs, verbose))
	lines.extend(render_statistics(packages, category_filter))
	return "\n".join(lines)
