# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import pytest

from ifc.errors import SchemaMismatch, UnsupportedSort
from ifc.file import File
from ifc.index import (
	Access,
	BasicSpecifiers,
	DeclIndex,
	DeclSort,
	ExprIndex,
	ExprSort,
	LiteralSort,
	LitIndex,
	NameIndex,
	NameSort,
	ScopeIndex,
	Sequence,
	SourceLocation,
	StringIndex,
	StringSort,
	TextOffset,
	TypeIndex,
	TypeSort,
)
from ifc.records.charts import FPLiteral, IntegerLiteral, StringLiteral, immediate_value
from ifc.records.declarations import ScopeDeclaration
from ifc.records.expressions import LiteralExpression, TupleExpression
from ifc.records.heaps import EXPR_HEAP, TYPE_HEAP
from ifc.records.names import identifier_text_offset
from ifc.test_support import IfcBuilder

HERE = SourceLocation(1, 2)


def _container() -> tuple[File, dict[str, TextOffset]]:
	b = IfcBuilder()
	names = {"point": b.add_string("point"), "hello": b.add_string("hello"), "s": b.add_string("s")}
	b.add_elements(
		ScopeDeclaration,
		[
			(
				NameIndex(NameSort.IDENTIFIER, int(names["point"])),
				HERE,
				TypeIndex(TypeSort.FUNDAMENTAL, 0),
				TypeIndex.null(),
				ScopeIndex(0),
				DeclIndex.null(),
				8,
				0,
				BasicSpecifiers.EXTERNAL,
				0,
				Access.NONE,
				0,
			),
		],
	)
	b.add_elements(
		LiteralExpression,
		[
			(HERE, TypeIndex.null(), LitIndex(LiteralSort.IMMEDIATE, 7)),
			(HERE, TypeIndex.null(), LitIndex(LiteralSort.IMMEDIATE, 9)),
			(HERE, TypeIndex.null(), LitIndex(LiteralSort.INTEGER, 0)),
		],
	)
	b.add_elements(EXPR_HEAP, [ExprIndex(ExprSort.LITERAL, 1), ExprIndex(ExprSort.LITERAL, 0), ExprIndex(ExprSort.LITERAL, 2)])
	b.add_elements(TupleExpression, [(HERE, TypeIndex.null(), Sequence(0, 2))])
	b.add_elements(IntegerLiteral, [(1 << 40,)])
	b.add_elements(FPLiteral, [(2.5, 8)])
	b.add_elements(StringLiteral, [(names["hello"], 5, names["s"])])
	return File(b.build()), names


def test_resolve_by_sort() -> None:
	ifc, names = _container()
	scope = ifc.resolve(DeclIndex(DeclSort.SCOPE, 0))
	assert isinstance(scope, ScopeDeclaration)
	assert scope.specifiers == BasicSpecifiers.EXTERNAL
	assert scope.access is Access.NONE
	assert scope.alignment == 8
	assert scope.locus == HERE
	assert ifc.get_string(identifier_text_offset(scope.name)) == "point"


def test_null_index_resolves_to_none() -> None:
	ifc, _ = _container()
	assert ifc.resolve(DeclIndex.null()) is None
	assert ifc.resolve(TypeIndex.null()) is None


def test_unknown_record_shape_is_unsupported() -> None:
	ifc, _ = _container()
	with pytest.raises(UnsupportedSort) as exc:
		ifc.resolve(DeclIndex(DeclSort.BARREN, 0))
	assert isinstance(exc.value, SchemaMismatch)


def test_tuple_elements_resolve_through_the_heap() -> None:
	ifc, _ = _container()
	tup = ifc.resolve(ExprIndex(ExprSort.TUPLE, 0))
	assert isinstance(tup, TupleExpression)
	elements = ifc.resolve_heap(EXPR_HEAP, tup.seq)
	assert [immediate_value(e.value) for e in elements] == [9, 7]


def test_empty_sequence_does_not_need_the_heap() -> None:
	ifc, _ = _container()
	assert ifc.try_get_partition(TYPE_HEAP) is None
	assert ifc.resolve_heap(TYPE_HEAP, Sequence(5, 0)) == []


def test_literal_constants() -> None:
	ifc, _ = _container()
	wide = ifc.resolve(ifc.expr_heap()[2])
	assert immediate_value(wide.value) is None
	assert ifc.resolve(wide.value) == IntegerLiteral(1 << 40)
	assert ifc.resolve(LitIndex(LiteralSort.FLOATING_POINT, 0)) == FPLiteral(2.5, 8)


def test_partition_refuses_a_key_of_another_sort() -> None:
	ifc, _ = _container()
	with pytest.raises(ValueError):
		ifc.partition(ScopeDeclaration)[DeclIndex(DeclSort.FUNCTION, 0)]


def test_strings() -> None:
	ifc, names = _container()
	lit = ifc.string_literals()[StringIndex(StringSort.UTF8, 0)]
	assert ifc.get_string(lit.start) == "hello"
	assert lit.size == 5
	assert ifc.get_string(lit.suffix) == "s"
	assert ifc.get_string(TextOffset(0)) == ""
	assert ifc.try_get_string(TextOffset(0)) is None
	assert ifc.try_get_string(names["point"]) == "point"
	with pytest.raises(IndexError):
		ifc.get_string(TextOffset(1 << 20))
