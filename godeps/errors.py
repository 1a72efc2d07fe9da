"""
Exception hierarchy for the dependency analyzer.

Everything raised by the library derives from GodepsError so the CLI and
the HTTP API can turn failures into an exit code or a response in one place.
"""

from __future__ import annotations

from typing import Iterable, Optional


class GodepsError(Exception):
	"""Base exception for all analyzer errors."""


class ParseError(GodepsError):
	"""A source file could not be read or its import preamble is malformed."""

	def __init__(self, path: str, cause: object):
		self.path = path
		self.cause = cause
		super().__init__(f"failed to parse {path}: {cause}")


class ConfigError(GodepsError):
	"""The run cannot start: bad paths or an unavailable working directory."""


class InvalidFilterError(GodepsError):
	"""Unrecognized category filter value."""

	def __init__(self, value: str, allowed: Optional[Iterable[str]] = None):
		self.value = value
		self.allowed = list(allowed or [])
		message = f"invalid type '{value}'"
		if self.allowed:
			message += f" (supported: {', '.join(self.allowed)})"
		super().__init__(message)


class EntryNotFoundError(ConfigError):
	"""The entry file does not exist."""

	def __init__(self, path: str):
		self.path = path
		super().__init__(f"file does not exist: {path}")
