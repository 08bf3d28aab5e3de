# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Small queries over a container that walk more than one partition."""

from __future__ import annotations

from typing import Any, List

from ifc.file import File
from ifc.index import DeclIndex, ExprSort, ScopeIndex, Sequence, TypeBasis
from ifc.partition import Partition
from ifc.records.declarations import Declaration, ScopeDeclaration
from ifc.records.expressions import QualifiedNameExpression, TupleExpression
from ifc.records.types import FundamentalType


def get_scope(ifc: File, decl: DeclIndex) -> ScopeDeclaration:
	return ifc.partition(ScopeDeclaration)[decl]


def get_declarations(ifc: File, scope: Sequence) -> Partition[Declaration]:
	return ifc.declarations().slice(scope)


def get_tuple_expression_elements(ifc: File, tuple_expr: TupleExpression) -> Partition[Any]:
	return ifc.expr_heap().slice(tuple_expr.seq)


def get_qualified_name_parts(ifc: File, qualified_name: QualifiedNameExpression) -> Partition[Any]:
	"""Name components of `a::b::c`, as entries of the expression heap."""
	elements = qualified_name.elements
	if elements.sort != ExprSort.TUPLE:
		raise ValueError(f"qualified name elements must be a tuple expression, got {elements!r}")
	return get_tuple_expression_elements(ifc, ifc.partition(TupleExpression)[elements])


def get_kind(scope: ScopeDeclaration, ifc: File) -> TypeBasis | int:
	"""Class, struct, union or namespace: the basis of the scope's fundamental type."""
	return ifc.partition(FundamentalType)[scope.type].basis


def scope_members(ifc: File, scope: ScopeIndex) -> List[DeclIndex]:
	"""Member declarations of a scope descriptor; empty for the null scope."""
	if scope.is_null:
		return []
	return [member.index for member in get_declarations(ifc, ifc.scope_descriptors()[scope])]


__all__ = [
	"get_scope",
	"get_declarations",
	"get_tuple_expression_elements",
	"get_qualified_name_parts",
	"get_kind",
	"scope_members",
]
