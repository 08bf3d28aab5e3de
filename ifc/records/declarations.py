# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Declaration records (`decl.*` partitions, addressed by DeclIndex)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar

from ifc.index import (
	Access,
	BasicSpecifiers,
	ChartIndex,
	DeclIndex,
	DeclSort,
	ExprIndex,
	Index,
	ModuleReference,
	NameIndex,
	ScopeIndex,
	Sequence,
	SourceLocation,
	TextOffset,
	TypeIndex,
)
from ifc.schema import (
	CHART,
	DECL,
	EXPR,
	LOCUS,
	MODULE_REFERENCE,
	NAME,
	PAD1,
	PAD2,
	PAD3,
	SCOPE,
	SEQUENCE,
	TEXT,
	TYPE,
	U8,
	U16,
	U32,
	BOOL,
	compile_layout,
	enum_u8,
	flags_u8,
	nested,
	partition_record,
)

ACCESS = enum_u8(Access)
SPECIFIERS = flags_u8(BasicSpecifiers)


class NoexceptSort(IntEnum):
	NONE = 0
	FALSE = 1
	TRUE = 2
	EXPRESSION = 3
	INFERRED = 4
	UNENFORCED = 5


class ParameterSort(IntEnum):
	OBJECT = 0
	TYPE = 1
	NON_TYPE = 2
	TEMPLATE = 3


@compile_layout
@dataclass(frozen=True)
class NoexceptSpecification:
	words: int
	sort: NoexceptSort | int

	LAYOUT: ClassVar = (U32, enum_u8(NoexceptSort), PAD3)


@compile_layout
@dataclass(frozen=True)
class ParameterizedEntity:
	decl: DeclIndex
	head: int
	body: int
	attributes: int

	LAYOUT: ClassVar = (DECL, U32, U32, U8, PAD3)


NOEXCEPT = nested(NoexceptSpecification)
ENTITY = nested(ParameterizedEntity)


@partition_record("scope.member", Index)
@dataclass(frozen=True)
class Declaration:
	"""One member slot of a scope; scope descriptors slice this partition."""

	index: DeclIndex

	LAYOUT: ClassVar = (DECL,)


@partition_record("decl.scope", DeclIndex, DeclSort.SCOPE)
@dataclass(frozen=True)
class ScopeDeclaration:
	name: NameIndex
	locus: SourceLocation
	type: TypeIndex
	base: TypeIndex
	initializer: ScopeIndex
	home_scope: DeclIndex
	alignment: int
	pack_size: int
	specifiers: BasicSpecifiers
	traits: int
	access: Access
	properties: int

	LAYOUT: ClassVar = (NAME, LOCUS, TYPE, TYPE, SCOPE, DECL, U32, U16, SPECIFIERS, U8, ACCESS, U8, PAD2)


@partition_record("decl.template", DeclIndex, DeclSort.TEMPLATE)
@dataclass(frozen=True)
class TemplateDeclaration:
	name: NameIndex
	locus: SourceLocation
	home_scope: DeclIndex
	chart: ChartIndex
	entity: ParameterizedEntity
	type: TypeIndex
	access: Access
	specifiers: BasicSpecifiers
	properties: int

	LAYOUT: ClassVar = (NAME, LOCUS, DECL, CHART, ENTITY, TYPE, ACCESS, SPECIFIERS, U8, PAD1)


@partition_record("decl.using", DeclIndex, DeclSort.USING)
@dataclass(frozen=True)
class UsingDeclaration:
	name: NameIndex
	locus: SourceLocation
	home_scope: DeclIndex
	resolution: DeclIndex
	parent: ExprIndex
	member_name: TextOffset
	specifiers: BasicSpecifiers
	access: Access
	hidden: bool

	LAYOUT: ClassVar = (NAME, LOCUS, DECL, DECL, EXPR, TEXT, SPECIFIERS, ACCESS, BOOL, PAD1)


@partition_record("decl.enum", DeclIndex, DeclSort.ENUMERATION)
@dataclass(frozen=True)
class Enumeration:
	name: TextOffset
	locus: SourceLocation
	type: TypeIndex
	base: TypeIndex
	initializer: Sequence
	home_scope: DeclIndex
	alignment: int
	specifiers: BasicSpecifiers
	access: Access
	properties: int

	LAYOUT: ClassVar = (TEXT, LOCUS, TYPE, TYPE, SEQUENCE, DECL, U32, SPECIFIERS, ACCESS, U8, PAD1)


@partition_record("decl.enumerator", DeclIndex, DeclSort.ENUMERATOR)
@dataclass(frozen=True)
class Enumerator:
	name: TextOffset
	locus: SourceLocation
	type: TypeIndex
	initializer: ExprIndex
	specifiers: BasicSpecifiers
	access: Access

	LAYOUT: ClassVar = (TEXT, LOCUS, TYPE, EXPR, SPECIFIERS, ACCESS, PAD2)


@partition_record("decl.alias", DeclIndex, DeclSort.ALIAS)
@dataclass(frozen=True)
class AliasDeclaration:
	name: TextOffset
	locus: SourceLocation
	type: TypeIndex
	home_scope: DeclIndex
	aliasee: TypeIndex
	specifiers: BasicSpecifiers
	access: Access

	LAYOUT: ClassVar = (TEXT, LOCUS, TYPE, DECL, TYPE, SPECIFIERS, ACCESS, PAD2)


@partition_record("decl.reference", DeclIndex, DeclSort.REFERENCE)
@dataclass(frozen=True)
class DeclReference:
	"""A declaration owned by another module, named by unit and local index."""

	unit: ModuleReference
	local_index: DeclIndex

	LAYOUT: ClassVar = (MODULE_REFERENCE, DECL)


@partition_record("decl.function", DeclIndex, DeclSort.FUNCTION)
@dataclass(frozen=True)
class FunctionDeclaration:
	name: NameIndex
	locus: SourceLocation
	type: TypeIndex
	home_scope: DeclIndex
	chart: ChartIndex
	traits: int
	specifiers: BasicSpecifiers
	access: Access
	properties: int

	LAYOUT: ClassVar = (NAME, LOCUS, TYPE, DECL, CHART, U16, SPECIFIERS, ACCESS, U8, PAD3)


@partition_record("decl.method", DeclIndex, DeclSort.METHOD)
@dataclass(frozen=True)
class MethodDeclaration:
	name: NameIndex
	locus: SourceLocation
	type: TypeIndex
	home_scope: DeclIndex
	chart: ChartIndex
	traits: int
	specifiers: BasicSpecifiers
	access: Access
	properties: int

	LAYOUT: ClassVar = (NAME, LOCUS, TYPE, DECL, CHART, U16, SPECIFIERS, ACCESS, U8, PAD3)


@partition_record("decl.constructor", DeclIndex, DeclSort.CONSTRUCTOR)
@dataclass(frozen=True)
class Constructor:
	name: TextOffset
	locus: SourceLocation
	type: TypeIndex
	home_scope: DeclIndex
	chart: ChartIndex
	traits: int
	specifiers: BasicSpecifiers
	access: Access
	properties: int

	LAYOUT: ClassVar = (TEXT, LOCUS, TYPE, DECL, CHART, U16, SPECIFIERS, ACCESS, U8, PAD3)


@partition_record("decl.destructor", DeclIndex, DeclSort.DESTRUCTOR)
@dataclass(frozen=True)
class Destructor:
	name: TextOffset
	locus: SourceLocation
	home_scope: DeclIndex
	eh_spec: NoexceptSpecification
	specifiers: BasicSpecifiers
	access: Access
	convention: int
	properties: int

	LAYOUT: ClassVar = (TEXT, LOCUS, DECL, NOEXCEPT, SPECIFIERS, ACCESS, U8, U8)


@partition_record("decl.variable", DeclIndex, DeclSort.VARIABLE)
@dataclass(frozen=True)
class VariableDeclaration:
	name: NameIndex
	locus: SourceLocation
	type: TypeIndex
	home_scope: DeclIndex
	initializer: ExprIndex
	alignment: int
	traits: int
	specifiers: BasicSpecifiers
	access: Access
	properties: int

	LAYOUT: ClassVar = (NAME, LOCUS, TYPE, DECL, EXPR, U32, U8, SPECIFIERS, ACCESS, U8)


@partition_record("decl.field", DeclIndex, DeclSort.FIELD)
@dataclass(frozen=True)
class FieldDeclaration:
	name: TextOffset
	locus: SourceLocation
	type: TypeIndex
	home_scope: DeclIndex
	initializer: ExprIndex
	alignment: int
	traits: int
	specifiers: BasicSpecifiers
	access: Access
	properties: int

	LAYOUT: ClassVar = (TEXT, LOCUS, TYPE, DECL, EXPR, U32, U8, SPECIFIERS, ACCESS, U8)


@partition_record("decl.parameter", DeclIndex, DeclSort.PARAMETER)
@dataclass(frozen=True)
class ParameterDeclaration:
	name: TextOffset
	locus: SourceLocation
	type: TypeIndex
	constraint: ExprIndex
	initializer: DeclIndex
	level: int
	position: int
	sort: ParameterSort | int
	properties: int

	LAYOUT: ClassVar = (TEXT, LOCUS, TYPE, EXPR, DECL, U32, U32, enum_u8(ParameterSort), U8, PAD2)


@partition_record("decl.concept", DeclIndex, DeclSort.CONCEPT)
@dataclass(frozen=True)
class Concept:
	name: TextOffset
	locus: SourceLocation
	home_scope: DeclIndex
	type: TypeIndex
	chart: ChartIndex
	constraint: ExprIndex
	specifiers: BasicSpecifiers
	access: Access
	head: int
	body: int

	LAYOUT: ClassVar = (TEXT, LOCUS, DECL, TYPE, CHART, EXPR, SPECIFIERS, ACCESS, PAD2, U32, U32)


@partition_record("decl.friend", DeclIndex, DeclSort.FRIEND)
@dataclass(frozen=True)
class FriendDeclaration:
	entity: ExprIndex

	LAYOUT: ClassVar = (EXPR,)


@partition_record("decl.intrinsic", DeclIndex, DeclSort.INTRINSIC)
@dataclass(frozen=True)
class IntrinsicDeclaration:
	name: TextOffset
	locus: SourceLocation
	type: TypeIndex
	home_scope: DeclIndex
	specifiers: BasicSpecifiers
	access: Access

	LAYOUT: ClassVar = (TEXT, LOCUS, TYPE, DECL, SPECIFIERS, ACCESS, PAD2)


__all__ = [
	"NoexceptSort",
	"ParameterSort",
	"NoexceptSpecification",
	"ParameterizedEntity",
	"Declaration",
	"ScopeDeclaration",
	"TemplateDeclaration",
	"UsingDeclaration",
	"Enumeration",
	"Enumerator",
	"AliasDeclaration",
	"DeclReference",
	"FunctionDeclaration",
	"MethodDeclaration",
	"Constructor",
	"Destructor",
	"VariableDeclaration",
	"FieldDeclaration",
	"ParameterDeclaration",
	"Concept",
	"FriendDeclaration",
	"IntrinsicDeclaration",
]
