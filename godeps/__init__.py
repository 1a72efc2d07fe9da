"""Static dependency classification for Go source trees.

Modules:
- go_parse.py: Import extraction from Go files with tree-sitter.
- gomod.py: Module root lookup in go.mod.
- fs_scan.py: Project root resolution and package directory listing.
- classify.py: Standard / third-party / internal package classification.
- traverse.py: Shallow and deep traversal from an entry file.
- report.py: Plain-text rendering of the classified packages.
- model.py: Result and filter models.
"""

__all__ = [
	"go_parse",
	"gomod",
	"fs_scan",
	"classify",
	"traverse",
	"report",
	"model",
]
