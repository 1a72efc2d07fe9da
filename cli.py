from __future__ import annotations

import argparse
import sys
from typing import List, NoReturn, Optional

import uvicorn

from godeps.config import Settings
from godeps.errors import GodepsError
from godeps.fs_scan import resolve_entry_file, resolve_project_root
from godeps.logging import setup_logging
from godeps.model import CategoryFilter
from godeps.report import render_report
from godeps.traverse import run_analysis


EXAMPLES = """\
examples:
  godeps -f service/manager/rpc/manager.go
  godeps -f service/manager/rpc/manager.go -d
  godeps -f service/admin/api/admin.go -d -v
  godeps -f service/manager/rpc/manager.go -type stdlib
  godeps -f service/manager/rpc/manager.go -type third-party
"""


class UsageParser(argparse.ArgumentParser):
	"""Reports usage errors with exit status 1."""

	def error(self, message: str) -> NoReturn:
		self.print_usage(sys.stderr)
		self.exit(1, f"error: {message}\n")


def build_parser() -> UsageParser:
	parser = UsageParser(
		prog="godeps",
		description="Classify the imports of a Go file as stdlib, third-party or internal.",
		epilog=EXAMPLES,
		formatter_class=argparse.RawDescriptionHelpFormatter,
	)
	parser.add_argument("-f", dest="file", default="", help="entry file path (required)")
	parser.add_argument("-d", dest="deep", action="store_true", help="deep analysis, recurse into internal packages")
	parser.add_argument("-v", dest="verbose", action="store_true", help="verbose output")
	parser.add_argument(
		"-type", "--type",
		dest="type",
		default=CategoryFilter.ALL.value,
		help="only show one kind of dependency: stdlib | third-party | internal | all (default)",
	)
	parser.add_argument("--root", default=None, help="project root (default: current directory)")
	parser.add_argument("--json", action="store_true", help="print the result as JSON")
	parser.add_argument(
		"--skip-unparsable",
		action="store_true",
		help="skip files found during deep analysis that fail to parse",
	)
	parser.add_argument("--log-level", default=None, help="logging level (default: WARNING)")
	return parser


def cmd_analyze(args: argparse.Namespace, parser: UsageParser, settings: Settings) -> None:
	if not args.file:
		parser.error("entry file path is required (-f)")
	if args.skip_unparsable:
		settings = settings.model_copy(update={"skip_unparsable": True})

	try:
		category = CategoryFilter.parse(args.type)
		entry = resolve_entry_file(args.file)
		resolve_project_root(args.root or settings.project_root)
		if not args.json:
			print(f"Analyzing file: {entry}")
			if args.deep:
				print("Mode: deep analysis (recursing into internal packages)")
			else:
				print("Mode: shallow analysis (direct dependencies only)")
		result = run_analysis(entry, args.root, deep=args.deep, category=category, settings=settings)
	except GodepsError as e:
		parser.error(str(e))

	if args.json:
		print(result.model_dump_json(indent=2))
	else:
		print(render_report(result.packages, verbose=args.verbose, category_filter=category))


def cmd_serve(args: argparse.Namespace) -> None:
	uvicorn.run("api:app", host=args.host, port=args.port, reload=args.reload)


def main(argv: Optional[List[str]] = None) -> None:
	settings = Settings()
	parser = build_parser()
	args = parser.parse_args(argv)
	setup_logging(args.log_level or settings.log_level)
	cmd_analyze(args, parser, settings)


def serve(argv: Optional[List[str]] = None) -> None:
	settings = Settings()
	parser = argparse.ArgumentParser(prog="godeps-serve", description="Run the analysis HTTP API")
	parser.add_argument("--host", default=settings.host)
	parser.add_argument("--port", type=int, default=settings.port)
	parser.add_argument("--reload", action="store_true")
	args = parser.parse_args(argv)
	setup_logging(settings.log_level)
	cmd_serve(args)


if __name__ == "__main__":
	main()
