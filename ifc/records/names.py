# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Name records (`name.*` partitions, addressed by NameIndex).

Identifier names have no partition: a NameIndex of sort IDENTIFIER carries a
text offset in its position bits.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from ifc.index import ExprIndex, NameIndex, NameSort, TextOffset, TypeIndex
from ifc.schema import EXPR, NAME, PAD2, TEXT, TYPE, U16, partition_record


@partition_record("name.operator", NameIndex, NameSort.OPERATOR)
@dataclass(frozen=True)
class OperatorFunctionName:
	encoded: TextOffset
	operator: int

	LAYOUT: ClassVar = (TEXT, U16, PAD2)


@partition_record("name.conversion", NameIndex, NameSort.CONVERSION)
@dataclass(frozen=True)
class ConversionFunctionName:
	target: TypeIndex
	encoded: TextOffset

	LAYOUT: ClassVar = (TYPE, TEXT)


@partition_record("name.literal", NameIndex, NameSort.LITERAL)
@dataclass(frozen=True)
class LiteralName:
	encoded: TextOffset

	LAYOUT: ClassVar = (TEXT,)


@partition_record("name.specialization", NameIndex, NameSort.SPECIALIZATION)
@dataclass(frozen=True)
class SpecializationName:
	primary_template: NameIndex
	template_arguments: ExprIndex

	LAYOUT: ClassVar = (NAME, EXPR)


def identifier_text_offset(name: NameIndex) -> TextOffset | None:
	"""Text offset of an identifier name; None for names of any other sort."""
	if name.sort != NameSort.IDENTIFIER:
		return None
	return TextOffset(name.index)


__all__ = [
	"OperatorFunctionName",
	"ConversionFunctionName",
	"LiteralName",
	"SpecializationName",
	"identifier_text_offset",
]
