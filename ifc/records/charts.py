# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Template parameter lists (`chart.*`) and literal constants (`const.*`)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from ifc.index import ChartIndex, ChartSort, ExprIndex, LiteralSort, LitIndex, StringIndex, TextOffset
from ifc.schema import EXPR, F64, PAD2, TEXT, U16, U32, U64, partition_record, pad


@partition_record("chart.unilevel", ChartIndex, ChartSort.UNILEVEL)
@dataclass(frozen=True)
class ChartUnilevel:
	"""One template parameter list: a run of `decl.parameter` entries."""

	start: int
	cardinality: int
	constraint: ExprIndex

	LAYOUT: ClassVar = (U32, U32, EXPR)


@partition_record("chart.multilevel", ChartIndex, ChartSort.MULTILEVEL)
@dataclass(frozen=True)
class ChartMultilevel:
	"""Nested parameter lists: a run of `chart.unilevel` entries."""

	start: int
	cardinality: int

	LAYOUT: ClassVar = (U32, U32)


@partition_record("const.i64", LitIndex, LiteralSort.INTEGER)
@dataclass(frozen=True)
class IntegerLiteral:
	value: int

	LAYOUT: ClassVar = (U64,)


@partition_record("const.f64", LitIndex, LiteralSort.FLOATING_POINT)
@dataclass(frozen=True)
class FPLiteral:
	value: float
	size: int

	LAYOUT: ClassVar = (F64, U16, PAD2, pad(4))


@partition_record("const.str", StringIndex)
@dataclass(frozen=True)
class StringLiteral:
	"""Text of a string literal; the StringIndex sort records its encoding."""

	start: TextOffset
	size: int
	suffix: TextOffset

	LAYOUT: ClassVar = (TEXT, U32, TEXT)


def immediate_value(literal: LitIndex) -> int | None:
	"""Small literals are stored in the index itself (sort IMMEDIATE)."""
	if literal.sort != LiteralSort.IMMEDIATE:
		return None
	return literal.index


__all__ = [
	"ChartUnilevel",
	"ChartMultilevel",
	"IntegerLiteral",
	"FPLiteral",
	"StringLiteral",
	"immediate_value",
]
