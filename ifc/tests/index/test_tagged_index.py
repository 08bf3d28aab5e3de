# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import pytest

from ifc.index import (
	ChartIndex,
	DeclIndex,
	DeclSort,
	ExprIndex,
	ExprSort,
	Index,
	NameIndex,
	NameSort,
	ScopeIndex,
	Sequence,
	SyntaxIndex,
	SyntaxSort,
	TextOffset,
	TypeIndex,
	TypeSort,
)


def test_raw_packs_sort_in_low_bits() -> None:
	decl = DeclIndex(DeclSort.FUNCTION, 5)
	assert decl.raw == (5 << 5) | 15
	assert DeclIndex.from_raw(decl.raw) == decl
	assert ExprIndex(ExprSort.TUPLE, 2).raw == (2 << 6) | 51
	assert SyntaxIndex.from_raw((9 << 7) | 100) == SyntaxIndex(SyntaxSort.TUPLE, 9)
	assert NameIndex.from_raw(8 << 3).sort is NameSort.IDENTIFIER


def test_decoded_sort_is_an_enum_member() -> None:
	decl = DeclIndex.from_raw((1 << 5) | 6)
	assert decl.sort is DeclSort.SCOPE
	assert decl.index == 1


def test_unknown_sort_is_kept_as_int() -> None:
	ty = TypeIndex.from_raw((2 << 5) | 30)
	assert ty.sort == 30
	assert not isinstance(ty.sort, TypeSort)
	assert ty.raw == (2 << 5) | 30
	assert repr(ty) == "TypeIndex(30, 2)"


def test_null_index() -> None:
	assert DeclIndex.null().is_null
	assert DeclIndex.from_raw(0).is_null
	assert not DeclIndex(DeclSort.SCOPE, 0).is_null
	assert not DeclIndex(DeclSort.VENDOR_EXTENSION, 1).is_null


def test_out_of_range_components_are_rejected() -> None:
	with pytest.raises(ValueError):
		DeclIndex(DeclSort.SCOPE, 1 << 27)
	with pytest.raises(ValueError):
		ChartIndex(4, 0)
	with pytest.raises(ValueError):
		ExprIndex(ExprSort.LITERAL, -1)


def test_index_kinds_are_distinct() -> None:
	assert DeclIndex(DeclSort.SCOPE, 1) != TypeIndex(TypeSort.POINTER, 1)
	assert int(DeclSort.SCOPE) == int(TypeSort.POINTER)
	assert not isinstance(ScopeIndex(1), Index)
	assert not isinstance(TextOffset(1), Index)
	assert repr(ScopeIndex(3)) == "ScopeIndex(3)"


def test_tagged_indices_are_hashable_keys() -> None:
	table = {DeclIndex(DeclSort.FUNCTION, 1): "f"}
	assert table[DeclIndex.from_raw((1 << 5) | 15)] == "f"


def test_scope_index_positions_are_one_based() -> None:
	assert ScopeIndex.position(ScopeIndex(1)) == 0
	assert ScopeIndex(0).is_null
	with pytest.raises(IndexError):
		ScopeIndex.position(ScopeIndex(0))
	assert Index.position(Index(0)) == 0


def test_sequence() -> None:
	assert Sequence().is_empty
	assert len(Sequence(3, 4)) == 4
	assert Sequence.unpack_from((7).to_bytes(4, "little") + (2).to_bytes(4, "little")) == Sequence(7, 2)
