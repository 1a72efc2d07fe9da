from __future__ import annotations

import logging
import sys


LOG_FORMAT = "%(asctime)s  %(name)-20s  %(levelname)-7s  %(message)s"


def setup_logging(level: str = "WARNING") -> logging.Logger:
	"""Configure root logging to stderr and return the package logger."""
	logging.basicConfig(
		level=getattr(logging, level.upper(), logging.WARNING),
		format=LOG_FORMAT,
		stream=sys.stderr,
	)
	return logging.getLogger("godeps")
