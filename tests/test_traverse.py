import os

import pytest

from conftest import MODULE, go_file
from godeps.config import Settings
from godeps.errors import EntryNotFoundError, ParseError
from godeps.model import Category, CategoryFilter
from godeps.traverse import DependencyAnalyzer, run_analysis


def _shop(go_project):
	return go_project({
		"cmd/app/main.go": go_file(
			"main",
			"fmt",
			"github.com/gin-gonic/gin",
			f"{MODULE}/internal/store",
		),
		"internal/store/a.go": go_file("store", "database/sql", f"{MODULE}/internal/util"),
		"internal/store/b.go": go_file("store", "github.com/lib/pq"),
		"internal/store/b_test.go": go_file("store", "testing", "github.com/stretchr/testify"),
		"internal/store/README.md": "not go",
		"internal/util/util.go": go_file("util", "strings", f"{MODULE}/internal/store"),
	})


def test_shallow_only_classifies_entry_imports(go_project):
	root = _shop(go_project)
	analyzer = DependencyAnalyzer(str(root))
	analyzer.analyze(str(root / "cmd/app/main.go"), deep=False)

	assert analyzer.sets[Category.STDLIB] == {"fmt"}
	assert analyzer.sets[Category.THIRD_PARTY] == {"github.com/gin-gonic/gin"}
	assert analyzer.sets[Category.INTERNAL] == {f"{MODULE}/internal/store"}
	assert analyzer.files == [str(root / "cmd/app/main.go")]


def test_deep_follows_internal_packages_and_skips_tests(go_project):
	root = _shop(go_project)
	analyzer = DependencyAnalyzer(str(root))
	analyzer.analyze(str(root / "cmd/app/main.go"), deep=True)

	pkgs = analyzer.packages()
	assert pkgs.stdlib == ["database/sql", "fmt", "strings"]
	assert pkgs.third_party == ["github.com/gin-gonic/gin", "github.com/lib/pq"]
	assert pkgs.internal == [f"{MODULE}/internal/store", f"{MODULE}/internal/util"]

	visited = {os.path.relpath(f, root) for f in analyzer.files}
	assert visited == {
		os.path.join("cmd", "app", "main.go"),
		os.path.join("internal", "store", "a.go"),
		os.path.join("internal", "store", "b.go"),
		os.path.join("internal", "util", "util.go"),
	}
	assert "testing" not in pkgs.stdlib


def test_circular_imports_visit_each_file_once(go_project):
	root = go_project({
		"main.go": go_file("main", f"{MODULE}/a"),
		"a/a.go": go_file("a", f"{MODULE}/b", "fmt"),
		"b/b.go": go_file("b", f"{MODULE}/a", "fmt"),
	})
	analyzer = DependencyAnalyzer(str(root))
	analyzer.analyze(str(root / "main.go"), deep=True)

	assert len(analyzer.files) == len(set(analyzer.files)) == 3
	assert analyzer.packages().internal == [f"{MODULE}/a", f"{MODULE}/b"]


def test_sets_are_disjoint_and_cover_visited_imports(go_project):
	root = _shop(go_project)
	analyzer = DependencyAnalyzer(str(root))
	analyzer.analyze(str(root / "cmd/app/main.go"), deep=True)

	stdlib, third, internal = (analyzer.sets[c] for c in Category)
	assert not (stdlib & third or stdlib & internal or third & internal)
	assert stdlib | third | internal == analyzer.visited_imports


def test_analysis_is_idempotent(go_project):
	root = _shop(go_project)
	entry = str(root / "cmd/app/main.go")
	first = run_analysis(entry, str(root), deep=True)
	second = run_analysis(entry, str(root), deep=True)
	assert first.packages == second.packages
	assert first.files == second.files


def test_module_root_package_maps_to_project_root(go_project):
	root = go_project({
		"cmd/main.go": go_file("main", MODULE),
		"shop.go": go_file("shop", "errors"),
	})
	analyzer = DependencyAnalyzer(str(root))
	assert analyzer.package_dir(MODULE) == str(root)
	analyzer.analyze(str(root / "cmd/main.go"), deep=True)
	assert "errors" in analyzer.sets[Category.STDLIB]


def test_missing_package_directory_is_not_an_error(go_project):
	root = go_project({"main.go": go_file("main", f"{MODULE}/gone")})
	analyzer = DependencyAnalyzer(str(root))
	analyzer.analyze(str(root / "main.go"), deep=True)
	assert analyzer.packages().internal == [f"{MODULE}/gone"]
	assert len(analyzer.files) == 1


def test_legacy_prefix_without_go_mod(go_project):
	root = go_project(
		{
			"main.go": go_file("main", "xiaoiron.com/admin/model"),
			"model/m.go": go_file("model", "time"),
		},
		module=None,
	)
	analyzer = DependencyAnalyzer(str(root), legacy_prefix="xiaoiron.com/admin")
	assert analyzer.module_root == ""
	analyzer.analyze(str(root / "main.go"), deep=True)
	assert analyzer.packages().internal == ["xiaoiron.com/admin/model"]
	assert analyzer.packages().stdlib == ["time"]


def test_parse_error_in_package_file_aborts(go_project):
	root = go_project({
		"main.go": go_file("main", f"{MODULE}/bad"),
		"bad/bad.go": 'import "fmt"\n',
	})
	analyzer = DependencyAnalyzer(str(root))
	with pytest.raises(ParseError) as exc:
		analyzer.analyze(str(root / "main.go"), deep=True)
	assert exc.value.path.endswith("bad.go")


def test_skip_unparsable_package_file(go_project):
	root = go_project({
		"main.go": go_file("main", f"{MODULE}/bad", f"{MODULE}/good"),
		"bad/bad.go": 'import "fmt"\n',
		"good/good.go": go_file("good", "sort"),
	})
	analyzer = DependencyAnalyzer(str(root), skip_unparsable=True)
	analyzer.analyze(str(root / "main.go"), deep=True)
	assert [os.path.basename(f) for f in analyzer.skipped_files] == ["bad.go"]
	assert "sort" in analyzer.sets[Category.STDLIB]


def test_skip_unparsable_never_skips_entry(go_project):
	root = go_project({"main.go": "not go at all\n"})
	analyzer = DependencyAnalyzer(str(root), skip_unparsable=True)
	with pytest.raises(ParseError):
		analyzer.analyze(str(root / "main.go"))


def test_run_analysis_filters_and_reports_context(go_project):
	root = _shop(go_project)
	result = run_analysis(
		str(root / "cmd/app/main.go"),
		str(root),
		deep=True,
		category=CategoryFilter.THIRD_PARTY,
		settings=Settings(),
	)
	assert result.project.module_root == MODULE
	assert result.packages.stdlib == []
	assert result.packages.internal == []
	assert result.packages.third_party == ["github.com/gin-gonic/gin", "github.com/lib/pq"]


def test_run_analysis_missing_entry(go_project):
	root = go_project({})
	with pytest.raises(EntryNotFoundError):
		run_analysis(str(root / "missing.go"), str(root))


def test_scripts_directory_resolves_to_parent(go_project):
	root = _shop(go_project)
	(root / "scripts").mkdir()
	result = run_analysis(str(root / "cmd/app/main.go"), str(root / "scripts"), deep=True)
	assert result.project.root == str(root)
	assert result.packages.internal
