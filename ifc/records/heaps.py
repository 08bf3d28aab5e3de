# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Heaps, scope descriptors and deduction guides.

A heap is a flat array of tagged indices addressed by plain `Index`; tuple
records slice a heap with a `Sequence` to hold heterogeneous children. Heap
entries are the bare tagged index types, so no record class wraps them.
"""

from __future__ import annotations

from ifc.index import AttrIndex, DeclIndex, ExprIndex, Index, ScopeIndex, Sequence, SyntaxIndex, TypeIndex
from ifc.schema import partition_spec

TYPE_HEAP = partition_spec("heap.type", TypeIndex, Index)
EXPR_HEAP = partition_spec("heap.expr", ExprIndex, Index)
ATTR_HEAP = partition_spec("heap.attr", AttrIndex, Index)
SYNTAX_HEAP = partition_spec("heap.syn", SyntaxIndex, Index)

# Each descriptor is the member range of one scope within `scope.member`.
SCOPE_DESCRIPTORS = partition_spec("scope.desc", Sequence, ScopeIndex)

DEDUCTION_GUIDES = partition_spec("name.guide", DeclIndex, Index)

__all__ = [
	"TYPE_HEAP",
	"EXPR_HEAP",
	"ATTR_HEAP",
	"SYNTAX_HEAP",
	"SCOPE_DESCRIPTORS",
	"DEDUCTION_GUIDES",
]
