# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Syntax-tree records (`syntax.*` partitions, addressed by SyntaxIndex)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from ifc.index import ExprIndex, Qualifier, Sequence, SourceLocation, SyntaxIndex, SyntaxSort, TextOffset, TypeIndex
from ifc.schema import (
	BOOL,
	EXPR,
	LOCUS,
	PAD1,
	PAD2,
	PAD3,
	SEQUENCE,
	SYNTAX,
	TEXT,
	TYPE,
	U8,
	U32,
	flags_u8,
	partition_record,
)

QUALIFIERS = flags_u8(Qualifier)


@partition_record("syntax.simple-type-specifier", SyntaxIndex, SyntaxSort.SIMPLE_TYPE_SPECIFIER)
@dataclass(frozen=True)
class SimpleTypeSpecifier:
	type: TypeIndex
	expr: ExprIndex
	locus: SourceLocation

	LAYOUT: ClassVar = (TYPE, EXPR, LOCUS)


@partition_record("syntax.decltype-specifier", SyntaxIndex, SyntaxSort.DECLTYPE_SPECIFIER)
@dataclass(frozen=True)
class DecltypeSpecifier:
	argument: ExprIndex
	decltype_keyword: SourceLocation
	left_paren: SourceLocation
	right_paren: SourceLocation

	LAYOUT: ClassVar = (EXPR, LOCUS, LOCUS, LOCUS)


@partition_record("syntax.type-specifier-seq", SyntaxIndex, SyntaxSort.TYPE_SPECIFIER_SEQ)
@dataclass(frozen=True)
class TypeSpecifierSeq:
	type_script: SyntaxIndex
	type: TypeIndex
	locus: SourceLocation
	qualifiers: Qualifier
	is_unhashed: bool

	LAYOUT: ClassVar = (SYNTAX, TYPE, LOCUS, QUALIFIERS, BOOL, PAD2)


@partition_record("syntax.decl-specifier-seq", SyntaxIndex, SyntaxSort.DECL_SPECIFIER_SEQ)
@dataclass(frozen=True)
class DeclSpecifierSeq:
	type: TypeIndex
	type_script: SyntaxIndex
	locus: SourceLocation
	storage_class: int
	declspec: TextOffset
	explicit_specifier: SyntaxIndex
	qualifiers: Qualifier

	LAYOUT: ClassVar = (TYPE, SYNTAX, LOCUS, U32, TEXT, SYNTAX, QUALIFIERS, PAD3)


@partition_record("syntax.type-id", SyntaxIndex, SyntaxSort.TYPE_ID)
@dataclass(frozen=True)
class TypeIdSyntax:
	type: TypeIndex
	type_specifier: SyntaxIndex
	abstract_declarator: SyntaxIndex
	locus: SourceLocation

	LAYOUT: ClassVar = (TYPE, SYNTAX, SYNTAX, LOCUS)


@partition_record("syntax.declarator", SyntaxIndex, SyntaxSort.DECLARATOR)
@dataclass(frozen=True)
class DeclaratorSyntax:
	pointer: SyntaxIndex
	parenthesized_declarator: SyntaxIndex
	array_or_function_declarator: SyntaxIndex
	trailing_return_type: SyntaxIndex
	virtual_specifiers: SyntaxIndex
	name: ExprIndex
	ellipsis: SourceLocation
	locus: SourceLocation
	qualifiers: Qualifier
	calling_convention: int

	LAYOUT: ClassVar = (SYNTAX, SYNTAX, SYNTAX, SYNTAX, SYNTAX, EXPR, LOCUS, LOCUS, QUALIFIERS, U8, PAD2)


@partition_record("syntax.pointer-declarator", SyntaxIndex, SyntaxSort.POINTER_DECLARATOR)
@dataclass(frozen=True)
class PointerDeclaratorSyntax:
	child: SyntaxIndex
	locus: SourceLocation
	kind: int
	qualifiers: Qualifier
	calling_convention: int

	LAYOUT: ClassVar = (SYNTAX, LOCUS, U8, QUALIFIERS, U8, PAD1)


@partition_record("syntax.function-declarator", SyntaxIndex, SyntaxSort.FUNCTION_DECLARATOR)
@dataclass(frozen=True)
class FunctionDeclaratorSyntax:
	parameters: SyntaxIndex
	exception_specification: SyntaxIndex
	left_paren: SourceLocation
	right_paren: SourceLocation
	ellipsis: SourceLocation
	ref_qualifier: SourceLocation
	traits: int

	LAYOUT: ClassVar = (SYNTAX, SYNTAX, LOCUS, LOCUS, LOCUS, LOCUS, U8, PAD3)


@partition_record("syntax.parameter-declarator", SyntaxIndex, SyntaxSort.PARAMETER_DECLARATOR)
@dataclass(frozen=True)
class ParameterDeclaratorSyntax:
	decl_specifier_seq: SyntaxIndex
	declarator: SyntaxIndex
	default_argument: ExprIndex
	locus: SourceLocation
	sort: int

	LAYOUT: ClassVar = (SYNTAX, SYNTAX, EXPR, LOCUS, U8, PAD3)


@partition_record("syntax.expression", SyntaxIndex, SyntaxSort.EXPRESSION)
@dataclass(frozen=True)
class ExpressionSyntax:
	expression: ExprIndex

	LAYOUT: ClassVar = (EXPR,)


@partition_record("syntax.requires-clause", SyntaxIndex, SyntaxSort.REQUIRES_CLAUSE)
@dataclass(frozen=True)
class RequiresClauseSyntax:
	expression: ExprIndex
	locus: SourceLocation

	LAYOUT: ClassVar = (EXPR, LOCUS)


@partition_record("syntax.simple-requirement", SyntaxIndex, SyntaxSort.SIMPLE_REQUIREMENT)
@dataclass(frozen=True)
class SimpleRequirementSyntax:
	expression: ExprIndex
	locus: SourceLocation

	LAYOUT: ClassVar = (EXPR, LOCUS)


@partition_record("syntax.type-requirement", SyntaxIndex, SyntaxSort.TYPE_REQUIREMENT)
@dataclass(frozen=True)
class TypeRequirementSyntax:
	type: ExprIndex
	locus: SourceLocation

	LAYOUT: ClassVar = (EXPR, LOCUS)


@partition_record("syntax.nested-requirement", SyntaxIndex, SyntaxSort.NESTED_REQUIREMENT)
@dataclass(frozen=True)
class NestedRequirementSyntax:
	condition: ExprIndex
	locus: SourceLocation

	LAYOUT: ClassVar = (EXPR, LOCUS)


@partition_record("syntax.compound-requirement", SyntaxIndex, SyntaxSort.COMPOUND_REQUIREMENT)
@dataclass(frozen=True)
class CompoundRequirementSyntax:
	expression: ExprIndex
	type_constraint: ExprIndex
	locus: SourceLocation
	right_curly: SourceLocation
	noexcept_keyword: SourceLocation
	arrow: SourceLocation

	LAYOUT: ClassVar = (EXPR, EXPR, LOCUS, LOCUS, LOCUS, LOCUS)


@partition_record("syntax.requirement-body", SyntaxIndex, SyntaxSort.REQUIREMENT_BODY)
@dataclass(frozen=True)
class RequirementBodySyntax:
	requirements: SyntaxIndex
	locus: SourceLocation
	right_curly: SourceLocation

	LAYOUT: ClassVar = (SYNTAX, LOCUS, LOCUS)


@partition_record("syntax.type-template-argument", SyntaxIndex, SyntaxSort.TYPE_TEMPLATE_ARGUMENT)
@dataclass(frozen=True)
class TypeTemplateArgumentSyntax:
	argument: SyntaxIndex
	ellipsis: SourceLocation
	comma: SourceLocation

	LAYOUT: ClassVar = (SYNTAX, LOCUS, LOCUS)


@partition_record("syntax.template-argument-list", SyntaxIndex, SyntaxSort.TEMPLATE_ARGUMENT_LIST)
@dataclass(frozen=True)
class TemplateArgumentListSyntax:
	arguments: SyntaxIndex
	left_angle: SourceLocation
	right_angle: SourceLocation

	LAYOUT: ClassVar = (SYNTAX, LOCUS, LOCUS)


@partition_record("syntax.template-id", SyntaxIndex, SyntaxSort.TEMPLATE_ID)
@dataclass(frozen=True)
class TemplateIdSyntax:
	name: SyntaxIndex
	symbol: ExprIndex
	arguments: SyntaxIndex
	locus: SourceLocation
	template_keyword: SourceLocation

	LAYOUT: ClassVar = (SYNTAX, EXPR, SYNTAX, LOCUS, LOCUS)


@partition_record("syntax.type-trait-intrinsic", SyntaxIndex, SyntaxSort.TYPE_TRAIT_INTRINSIC)
@dataclass(frozen=True)
class TypeTraitIntrinsicSyntax:
	arguments: SyntaxIndex
	locus: SourceLocation
	intrinsic: int

	LAYOUT: ClassVar = (SYNTAX, LOCUS, U32)


@partition_record("syntax.tuple", SyntaxIndex, SyntaxSort.TUPLE)
@dataclass(frozen=True)
class TupleSyntax:
	"""Elements live in `heap.syn`, sliced by `seq`."""

	seq: Sequence

	LAYOUT: ClassVar = (SEQUENCE,)


__all__ = [
	"SimpleTypeSpecifier",
	"DecltypeSpecifier",
	"TypeSpecifierSeq",
	"DeclSpecifierSeq",
	"TypeIdSyntax",
	"DeclaratorSyntax",
	"PointerDeclaratorSyntax",
	"FunctionDeclaratorSyntax",
	"ParameterDeclaratorSyntax",
	"ExpressionSyntax",
	"RequiresClauseSyntax",
	"SimpleRequirementSyntax",
	"TypeRequirementSyntax",
	"NestedRequirementSyntax",
	"CompoundRequirementSyntax",
	"RequirementBodySyntax",
	"TypeTemplateArgumentSyntax",
	"TemplateArgumentListSyntax",
	"TemplateIdSyntax",
	"TypeTraitIntrinsicSyntax",
	"TupleSyntax",
]
