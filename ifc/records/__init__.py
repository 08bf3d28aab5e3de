# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Record shapes of every partition the reader understands.

Importing this package registers all partitions with `ifc.schema`, which is
what lets `File.resolve` turn a tagged index into a record.
"""

from __future__ import annotations

from ifc.records import attributes, charts, declarations, expressions, heaps, names, syntax, traits, types
from ifc.records.heaps import (
	ATTR_HEAP,
	DEDUCTION_GUIDES,
	EXPR_HEAP,
	SCOPE_DESCRIPTORS,
	SYNTAX_HEAP,
	TYPE_HEAP,
)
from ifc.records.traits import DECL_ATTRIBUTES

__all__ = [
	"attributes",
	"charts",
	"declarations",
	"expressions",
	"heaps",
	"names",
	"syntax",
	"traits",
	"types",
	"ATTR_HEAP",
	"DEDUCTION_GUIDES",
	"EXPR_HEAP",
	"SCOPE_DESCRIPTORS",
	"SYNTAX_HEAP",
	"TYPE_HEAP",
	"DECL_ATTRIBUTES",
]
