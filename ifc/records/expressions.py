# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Expression records (`expr.*` partitions, addressed by ExprIndex)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar

from ifc.index import (
	DeclIndex,
	ExprIndex,
	ExprSort,
	LitIndex,
	NameIndex,
	Sequence,
	SourceLocation,
	SyntaxIndex,
	TypeIndex,
)
from ifc.schema import (
	DECL,
	EXPR,
	LIT,
	LOCUS,
	NAME,
	PAD2,
	PAD3,
	SEQUENCE,
	SYNTAX,
	TYPE,
	U16,
	enum_u8,
	partition_record,
)


class ReadKind(IntEnum):
	UNKNOWN = 0
	INDIRECTION = 1
	REMOVE_REFERENCE = 2
	LVALUE_TO_RVALUE = 3
	INTEGRAL_CONVERSION = 4


class ExpressionListDelimiter(IntEnum):
	UNKNOWN = 0
	BRACE = 1
	PARENTHESIS = 2


@partition_record("expr.literal", ExprIndex, ExprSort.LITERAL)
@dataclass(frozen=True)
class LiteralExpression:
	locus: SourceLocation
	type: TypeIndex
	value: LitIndex

	LAYOUT: ClassVar = (LOCUS, TYPE, LIT)


@partition_record("expr.type", ExprIndex, ExprSort.TYPE)
@dataclass(frozen=True)
class TypeExpression:
	locus: SourceLocation
	type: TypeIndex
	denotation: TypeIndex

	LAYOUT: ClassVar = (LOCUS, TYPE, TYPE)


@partition_record("expr.decl", ExprIndex, ExprSort.NAMED_DECL)
@dataclass(frozen=True)
class NamedDecl:
	locus: SourceLocation
	type: TypeIndex
	decl: DeclIndex

	LAYOUT: ClassVar = (LOCUS, TYPE, DECL)


@partition_record("expr.unqualified-id", ExprIndex, ExprSort.UNQUALIFIED_ID)
@dataclass(frozen=True)
class UnqualifiedId:
	locus: SourceLocation
	type: TypeIndex
	name: NameIndex
	symbol: ExprIndex
	template_keyword: SourceLocation

	LAYOUT: ClassVar = (LOCUS, TYPE, NAME, EXPR, LOCUS)


@partition_record("expr.template-id", ExprIndex, ExprSort.TEMPLATE_ID)
@dataclass(frozen=True)
class TemplateId:
	locus: SourceLocation
	type: TypeIndex
	primary_template: ExprIndex
	arguments: ExprIndex

	LAYOUT: ClassVar = (LOCUS, TYPE, EXPR, EXPR)


@partition_record("expr.monad", ExprIndex, ExprSort.MONAD)
@dataclass(frozen=True)
class MonadExpression:
	locus: SourceLocation
	type: TypeIndex
	impl: DeclIndex
	argument: ExprIndex
	assort: int

	LAYOUT: ClassVar = (LOCUS, TYPE, DECL, EXPR, U16, PAD2)


@partition_record("expr.dyad", ExprIndex, ExprSort.DYAD)
@dataclass(frozen=True)
class DyadExpression:
	locus: SourceLocation
	type: TypeIndex
	impl: DeclIndex
	left: ExprIndex
	right: ExprIndex
	assort: int

	LAYOUT: ClassVar = (LOCUS, TYPE, DECL, EXPR, EXPR, U16, PAD2)


@partition_record("expr.call", ExprIndex, ExprSort.CALL)
@dataclass(frozen=True)
class CallExpression:
	locus: SourceLocation
	type: TypeIndex
	function: ExprIndex
	arguments: ExprIndex

	LAYOUT: ClassVar = (LOCUS, TYPE, EXPR, EXPR)


@partition_record("expr.sizeof", ExprIndex, ExprSort.SIZEOF_TYPE)
@dataclass(frozen=True)
class SizeofExpression:
	locus: SourceLocation
	type: TypeIndex
	operand: TypeIndex

	LAYOUT: ClassVar = (LOCUS, TYPE, TYPE)


@partition_record("expr.alignof", ExprIndex, ExprSort.ALIGNOF)
@dataclass(frozen=True)
class AlignofExpression:
	locus: SourceLocation
	type: TypeIndex
	operand: TypeIndex

	LAYOUT: ClassVar = (LOCUS, TYPE, TYPE)


@partition_record("expr.requires", ExprIndex, ExprSort.REQUIRES)
@dataclass(frozen=True)
class RequiresExpression:
	locus: SourceLocation
	type: TypeIndex
	parameters: SyntaxIndex
	body: SyntaxIndex

	LAYOUT: ClassVar = (LOCUS, TYPE, SYNTAX, SYNTAX)


@partition_record("expr.tuple", ExprIndex, ExprSort.TUPLE)
@dataclass(frozen=True)
class TupleExpression:
	"""Elements live in `heap.expr`, sliced by `seq`."""

	locus: SourceLocation
	type: TypeIndex
	seq: Sequence

	LAYOUT: ClassVar = (LOCUS, TYPE, SEQUENCE)


@partition_record("expr.path", ExprIndex, ExprSort.PATH)
@dataclass(frozen=True)
class PathExpression:
	locus: SourceLocation
	type: TypeIndex
	scope: ExprIndex
	member: ExprIndex

	LAYOUT: ClassVar = (LOCUS, TYPE, EXPR, EXPR)


@partition_record("expr.read", ExprIndex, ExprSort.READ)
@dataclass(frozen=True)
class ReadExpression:
	locus: SourceLocation
	type: TypeIndex
	child: ExprIndex
	kind: ReadKind | int

	LAYOUT: ClassVar = (LOCUS, TYPE, EXPR, enum_u8(ReadKind), PAD3)


@partition_record("expr.syntax-tree", ExprIndex, ExprSort.SYNTAX_TREE)
@dataclass(frozen=True)
class SyntaxTreeExpression:
	syntax: SyntaxIndex

	LAYOUT: ClassVar = (SYNTAX,)


@partition_record("expr.expression-list", ExprIndex, ExprSort.EXPRESSION_LIST)
@dataclass(frozen=True)
class ExpressionListExpression:
	left: SourceLocation
	right: SourceLocation
	expressions: ExprIndex
	delimiter: ExpressionListDelimiter | int

	LAYOUT: ClassVar = (LOCUS, LOCUS, EXPR, enum_u8(ExpressionListDelimiter), PAD3)


@partition_record("expr.qualified-name", ExprIndex, ExprSort.QUALIFIED_NAME)
@dataclass(frozen=True)
class QualifiedNameExpression:
	"""`elements` is an `expr.tuple` index holding the name's parts."""

	locus: SourceLocation
	type: TypeIndex
	elements: ExprIndex
	typename_keyword: SourceLocation

	LAYOUT: ClassVar = (LOCUS, TYPE, EXPR, LOCUS)


@partition_record("expr.packed-template-arguments", ExprIndex, ExprSort.PACKED_TEMPLATE_ARGUMENTS)
@dataclass(frozen=True)
class PackedTemplateArguments:
	locus: SourceLocation
	type: TypeIndex
	arguments: ExprIndex

	LAYOUT: ClassVar = (LOCUS, TYPE, EXPR)


@partition_record("expr.product-type-value", ExprIndex, ExprSort.PRODUCT_TYPE_VALUE)
@dataclass(frozen=True)
class ProductValueTypeExpression:
	locus: SourceLocation
	type: TypeIndex
	structure: TypeIndex
	members: ExprIndex
	base_class_values: ExprIndex

	LAYOUT: ClassVar = (LOCUS, TYPE, TYPE, EXPR, EXPR)


__all__ = [
	"ReadKind",
	"ExpressionListDelimiter",
	"LiteralExpression",
	"TypeExpression",
	"NamedDecl",
	"UnqualifiedId",
	"TemplateId",
	"MonadExpression",
	"DyadExpression",
	"CallExpression",
	"SizeofExpression",
	"AlignofExpression",
	"RequiresExpression",
	"TupleExpression",
	"PathExpression",
	"ReadExpression",
	"SyntaxTreeExpression",
	"ExpressionListExpression",
	"QualifiedNameExpression",
	"PackedTemplateArguments",
	"ProductValueTypeExpression",
]
