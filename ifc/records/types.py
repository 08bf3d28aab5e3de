# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Type records (`type.*` partitions, addressed by TypeIndex)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar

from ifc.index import (
	Access,
	ChartIndex,
	DeclIndex,
	ExprIndex,
	Qualifier,
	Sequence,
	SyntaxIndex,
	TypeBasis,
	TypeIndex,
	TypeSort,
)
from ifc.records.declarations import NOEXCEPT, NoexceptSpecification
from ifc.schema import (
	CHART,
	DECL,
	EXPR,
	PAD1,
	PAD2,
	PAD3,
	SEQUENCE,
	SYNTAX,
	TYPE,
	U8,
	enum_u8,
	flags_u8,
	partition_record,
)


class TypePrecision(IntEnum):
	DEFAULT = 0
	SHORT = 1
	LONG = 2
	BIT8 = 3
	BIT16 = 4
	BIT32 = 5
	BIT64 = 6
	BIT128 = 7


class TypeSign(IntEnum):
	PLAIN = 0
	SIGNED = 1
	UNSIGNED = 2


class ExpansionMode(IntEnum):
	FULL = 0
	PARTIAL = 1


@partition_record("type.fundamental", TypeIndex, TypeSort.FUNDAMENTAL)
@dataclass(frozen=True)
class FundamentalType:
	basis: TypeBasis | int
	precision: TypePrecision | int
	sign: TypeSign | int

	LAYOUT: ClassVar = (enum_u8(TypeBasis), enum_u8(TypePrecision), enum_u8(TypeSign), PAD1)


@partition_record("type.designated", TypeIndex, TypeSort.DESIGNATED)
@dataclass(frozen=True)
class DesignatedType:
	decl: DeclIndex

	LAYOUT: ClassVar = (DECL,)


@partition_record("type.tor", TypeIndex, TypeSort.TOR)
@dataclass(frozen=True)
class TorType:
	"""Constructor/destructor signature: parameters and exception spec only."""

	source: TypeIndex
	eh_spec: NoexceptSpecification
	convention: int

	LAYOUT: ClassVar = (TYPE, NOEXCEPT, U8, PAD3)


@partition_record("type.syntactic", TypeIndex, TypeSort.SYNTACTIC)
@dataclass(frozen=True)
class SyntacticType:
	expr: ExprIndex

	LAYOUT: ClassVar = (EXPR,)


@partition_record("type.expansion", TypeIndex, TypeSort.EXPANSION)
@dataclass(frozen=True)
class ExpansionType:
	pack: TypeIndex
	mode: ExpansionMode | int

	LAYOUT: ClassVar = (TYPE, enum_u8(ExpansionMode), PAD3)


@partition_record("type.pointer", TypeIndex, TypeSort.POINTER)
@dataclass(frozen=True)
class PointerType:
	pointee: TypeIndex

	LAYOUT: ClassVar = (TYPE,)


@partition_record("type.function", TypeIndex, TypeSort.FUNCTION)
@dataclass(frozen=True)
class FunctionType:
	target: TypeIndex
	source: TypeIndex
	eh_spec: NoexceptSpecification
	convention: int
	traits: int

	LAYOUT: ClassVar = (TYPE, TYPE, NOEXCEPT, U8, U8, PAD2)


@partition_record("type.nonstatic-member-function", TypeIndex, TypeSort.METHOD)
@dataclass(frozen=True)
class MethodType:
	target: TypeIndex
	source: TypeIndex
	class_type: TypeIndex
	eh_spec: NoexceptSpecification
	convention: int
	traits: int

	LAYOUT: ClassVar = (TYPE, TYPE, TYPE, NOEXCEPT, U8, U8, PAD2)


@partition_record("type.base", TypeIndex, TypeSort.BASE)
@dataclass(frozen=True)
class BaseType:
	type: TypeIndex
	access: Access | int
	traits: int

	LAYOUT: ClassVar = (TYPE, enum_u8(Access), U8, PAD2)


@partition_record("type.tuple", TypeIndex, TypeSort.TUPLE)
@dataclass(frozen=True)
class TupleType:
	"""Element types live in `heap.type`, sliced by `seq`."""

	seq: Sequence

	LAYOUT: ClassVar = (SEQUENCE,)


@partition_record("type.lvalue-reference", TypeIndex, TypeSort.LVALUE_REFERENCE)
@dataclass(frozen=True)
class LvalueReference:
	referee: TypeIndex

	LAYOUT: ClassVar = (TYPE,)


@partition_record("type.rvalue-reference", TypeIndex, TypeSort.RVALUE_REFERENCE)
@dataclass(frozen=True)
class RvalueReference:
	referee: TypeIndex

	LAYOUT: ClassVar = (TYPE,)


@partition_record("type.qualified", TypeIndex, TypeSort.QUALIFIED)
@dataclass(frozen=True)
class QualifiedType:
	unqualified_type: TypeIndex
	qualifiers: Qualifier

	LAYOUT: ClassVar = (TYPE, flags_u8(Qualifier), PAD3)


@partition_record("type.forall", TypeIndex, TypeSort.FORALL)
@dataclass(frozen=True)
class ForallType:
	chart: ChartIndex
	subject: TypeIndex

	LAYOUT: ClassVar = (CHART, TYPE)


@partition_record("type.syntax-tree", TypeIndex, TypeSort.SYNTAX_TREE)
@dataclass(frozen=True)
class SyntaxType:
	syntax: SyntaxIndex

	LAYOUT: ClassVar = (SYNTAX,)


@partition_record("type.placeholder", TypeIndex, TypeSort.PLACEHOLDER)
@dataclass(frozen=True)
class PlaceholderType:
	constraint: ExprIndex
	basis: TypeBasis | int
	elaboration: TypeIndex

	LAYOUT: ClassVar = (EXPR, enum_u8(TypeBasis), PAD3, TYPE)


@partition_record("type.typename", TypeIndex, TypeSort.TYPENAME)
@dataclass(frozen=True)
class TypenameType:
	path: ExprIndex

	LAYOUT: ClassVar = (EXPR,)


@partition_record("type.decltype", TypeIndex, TypeSort.DECLTYPE)
@dataclass(frozen=True)
class DecltypeType:
	expression: SyntaxIndex

	LAYOUT: ClassVar = (SYNTAX,)


__all__ = [
	"TypePrecision",
	"TypeSign",
	"ExpansionMode",
	"FundamentalType",
	"DesignatedType",
	"TorType",
	"SyntacticType",
	"ExpansionType",
	"PointerType",
	"FunctionType",
	"MethodType",
	"BaseType",
	"TupleType",
	"LvalueReference",
	"RvalueReference",
	"QualifiedType",
	"ForallType",
	"SyntaxType",
	"PlaceholderType",
	"TypenameType",
	"DecltypeType",
]
