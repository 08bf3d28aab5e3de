# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Attribute records (`attr.*` partitions, addressed by AttrIndex)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar

from ifc.index import AttrIndex, AttrSort, Sequence, SourceLocation
from ifc.schema import ATTR, LOCUS, PAD1, SEQUENCE, U16, U32, compile_layout, enum_u8, nested, partition_record


class WordSort(IntEnum):
	UNKNOWN = 0
	DIRECTIVE = 1
	PUNCTUATOR = 2
	LITERAL = 3
	OPERATOR = 4
	KEYWORD = 5
	IDENTIFIER = 6


@compile_layout
@dataclass(frozen=True)
class Word:
	"""One token of attribute text; `index` is interpreted per `sort`."""

	locus: SourceLocation
	index: int
	category: int
	sort: WordSort | int

	LAYOUT: ClassVar = (LOCUS, U32, U16, enum_u8(WordSort), PAD1)


WORD = nested(Word)


@partition_record("attr.basic", AttrIndex, AttrSort.BASIC)
@dataclass(frozen=True)
class AttrBasic:
	word: Word

	LAYOUT: ClassVar = (WORD,)


@partition_record("attr.scoped", AttrIndex, AttrSort.SCOPED)
@dataclass(frozen=True)
class AttrScoped:
	scope: Word
	member: Word

	LAYOUT: ClassVar = (WORD, WORD)


@partition_record("attr.labeled", AttrIndex, AttrSort.LABELED)
@dataclass(frozen=True)
class AttrLabeled:
	label: Word
	attribute: AttrIndex

	LAYOUT: ClassVar = (WORD, ATTR)


@partition_record("attr.called", AttrIndex, AttrSort.CALLED)
@dataclass(frozen=True)
class AttrCalled:
	function: AttrIndex
	arguments: AttrIndex

	LAYOUT: ClassVar = (ATTR, ATTR)


@partition_record("attr.expanded", AttrIndex, AttrSort.EXPANDED)
@dataclass(frozen=True)
class AttrExpanded:
	operand: AttrIndex

	LAYOUT: ClassVar = (ATTR,)


@partition_record("attr.factored", AttrIndex, AttrSort.FACTORED)
@dataclass(frozen=True)
class AttrFactored:
	factor: Word
	terms: AttrIndex

	LAYOUT: ClassVar = (WORD, ATTR)


@partition_record("attr.elaborated", AttrIndex, AttrSort.ELABORATED)
@dataclass(frozen=True)
class AttrElaborated:
	word: Word

	LAYOUT: ClassVar = (WORD,)


@partition_record("attr.tuple", AttrIndex, AttrSort.TUPLE)
@dataclass(frozen=True)
class AttrTuple:
	"""Elements live in `heap.attr`, sliced by `seq`."""

	seq: Sequence

	LAYOUT: ClassVar = (SEQUENCE,)


__all__ = [
	"WordSort",
	"Word",
	"AttrBasic",
	"AttrScoped",
	"AttrLabeled",
	"AttrCalled",
	"AttrExpanded",
	"AttrFactored",
	"AttrElaborated",
	"AttrTuple",
]
