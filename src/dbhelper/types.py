"""Shared types for the dbhelper package."""

from typing import Any, Sequence

Row = dict[str, Any]
Params = Sequence[Any]
Statements = Sequence[str]
