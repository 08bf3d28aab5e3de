# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Record layouts and the partition registry.

A record shape is a frozen dataclass plus a `LAYOUT`: one codec per dataclass
field, in field order, with padding codecs interleaved where the writer pads.
`partition_record` compiles the layout into a single `struct.Struct`, attaches
`SIZE`/`STRUCT`/`unpack_from`, and registers a `PartitionSpec` for the record.

Every `PartitionSpec` owns a fixed cache slot number, assigned once at import
time, so a container can memoize the resolved location of each logical
partition in a flat list instead of re-walking its table of contents.

The sort registry maps (index kind, sort) to the one spec holding records of
that shape; it is what turns a tagged index into a concrete record.
"""

from __future__ import annotations

import dataclasses
import itertools
import struct
from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import Any, Callable, Dict, Iterable, Optional, Tuple, Type

from ifc.index import (
	AbstractIndex,
	AttrIndex,
	ChartIndex,
	DeclIndex,
	ExprIndex,
	Index,
	LitIndex,
	ModuleReference,
	NameIndex,
	ScopeIndex,
	Sequence,
	SourceLocation,
	StringIndex,
	SyntaxIndex,
	TextOffset,
	TypeIndex,
	UnitIndex,
	coerce_enum,
)


@dataclass(frozen=True)
class FieldCodec:
	"""How one record field is stored: struct characters plus a decoder."""

	fmt: str
	arity: int
	decode: Optional[Callable[..., Any]] = None


def pad(n: int) -> FieldCodec:
	return FieldCodec(fmt=f"{n}x", arity=0)


def enum_u8(enum_type: Type[IntEnum]) -> FieldCodec:
	return FieldCodec(fmt="B", arity=1, decode=lambda v: coerce_enum(enum_type, v))


def enum_u16(enum_type: Type[IntEnum]) -> FieldCodec:
	return FieldCodec(fmt="H", arity=1, decode=lambda v: coerce_enum(enum_type, v))


def flags_u8(flag_type: Type[IntFlag]) -> FieldCodec:
	return FieldCodec(fmt="B", arity=1, decode=flag_type)


def index_codec(kind: Any) -> FieldCodec:
	return FieldCodec(fmt="I", arity=1, decode=kind.from_raw)


U8 = FieldCodec(fmt="B", arity=1, decode=int)
U16 = FieldCodec(fmt="H", arity=1, decode=int)
U32 = FieldCodec(fmt="I", arity=1, decode=int)
U64 = FieldCodec(fmt="Q", arity=1, decode=int)
F64 = FieldCodec(fmt="d", arity=1, decode=float)
BOOL = FieldCodec(fmt="B", arity=1, decode=bool)
PAD1 = pad(1)
PAD2 = pad(2)
PAD3 = pad(3)

INDEX = index_codec(Index)
SCOPE = index_codec(ScopeIndex)
TEXT = index_codec(TextOffset)
DECL = index_codec(DeclIndex)
TYPE = index_codec(TypeIndex)
EXPR = index_codec(ExprIndex)
NAME = index_codec(NameIndex)
CHART = index_codec(ChartIndex)
SYNTAX = index_codec(SyntaxIndex)
ATTR = index_codec(AttrIndex)
UNIT = index_codec(UnitIndex)
LIT = index_codec(LitIndex)
STRING = index_codec(StringIndex)
SEQUENCE = FieldCodec(fmt="II", arity=2, decode=Sequence)
LOCUS = FieldCodec(fmt="II", arity=2, decode=SourceLocation)
MODULE_REFERENCE = FieldCodec(fmt="II", arity=2, decode=lambda owner, partition: ModuleReference(TextOffset(owner), TextOffset(partition)))


def nested(record_type: Any) -> FieldCodec:
	"""Embed a compiled record as a field of another record."""
	codecs = [c for c in record_type.LAYOUT if c.arity]
	arity = sum(c.arity for c in codecs)
	fmt = "".join(c.fmt for c in record_type.LAYOUT)

	def _decode(*raw: Any) -> Any:
		return record_type(*_decode_fields(codecs, raw))

	return FieldCodec(fmt=fmt, arity=arity, decode=_decode)


def _decode_fields(codecs: list[FieldCodec], raw: Tuple[Any, ...]) -> list[Any]:
	out: list[Any] = []
	pos = 0
	for codec in codecs:
		if codec.arity == 1:
			out.append(codec.decode(raw[pos]))
		else:
			out.append(codec.decode(*raw[pos : pos + codec.arity]))
		pos += codec.arity
	return out


@dataclass(frozen=True, eq=False)
class PartitionSpec:
	"""
	A logical partition kind: its default name, element type and index kind.

	Identity semantics: two specs are the same logical partition only if they are
	the same object, which is what the per-container cache slots key on.
	"""

	name: str
	element: Any
	index_kind: Any
	sort: IntEnum | None = None
	slot: int = dataclasses.field(default_factory=lambda: next(_SLOT_COUNTER))

	@property
	def entry_size(self) -> int:
		return self.element.SIZE

	def __repr__(self) -> str:
		return f"PartitionSpec({self.name!r}, {getattr(self.element, '__name__', self.element)}, slot={self.slot})"


_SLOT_COUNTER = itertools.count()
_SPECS_BY_NAME: Dict[str, PartitionSpec] = {}
_SPECS_BY_SORT: Dict[Tuple[type, int], PartitionSpec] = {}


def register_partition(spec: PartitionSpec) -> PartitionSpec:
	prev = _SPECS_BY_NAME.get(spec.name)
	if prev is not None and prev is not spec:
		raise ValueError(f"partition name '{spec.name}' registered twice")
	_SPECS_BY_NAME[spec.name] = spec
	if spec.sort is not None:
		key = (spec.index_kind, int(spec.sort))
		prev = _SPECS_BY_SORT.get(key)
		if prev is not None and prev is not spec:
			raise ValueError(f"{spec.index_kind.__name__} sort {spec.sort!r} already maps to '{prev.name}'")
		_SPECS_BY_SORT[key] = spec
	return spec


def partition_spec(name: str, element: Any, index_kind: Any, sort: IntEnum | None = None) -> PartitionSpec:
	"""Declare and register a partition whose element type already knows its size."""
	return register_partition(PartitionSpec(name=name, element=element, index_kind=index_kind, sort=sort))


def compile_layout(cls: Any) -> Any:
	"""Attach SIZE/STRUCT/unpack_from to a frozen dataclass that declares LAYOUT."""
	layout: Iterable[FieldCodec] = cls.LAYOUT
	codecs = [c for c in layout if c.arity]
	fields = dataclasses.fields(cls)
	if len(codecs) != len(fields):
		raise TypeError(f"{cls.__name__}: layout describes {len(codecs)} fields but the record declares {len(fields)}")
	layout_struct = struct.Struct("<" + "".join(c.fmt for c in layout))
	simple = all(c.arity == 1 for c in codecs)
	decoders = tuple(c.decode for c in codecs)

	if simple:

		def unpack_from(buffer: Any, offset: int = 0) -> Any:
			raw = layout_struct.unpack_from(buffer, offset)
			return cls(*[decode(value) for decode, value in zip(decoders, raw)])

	else:

		def unpack_from(buffer: Any, offset: int = 0) -> Any:
			return cls(*_decode_fields(codecs, layout_struct.unpack_from(buffer, offset)))

	cls.STRUCT = layout_struct
	cls.SIZE = layout_struct.size
	cls.unpack_from = staticmethod(unpack_from)
	return cls


def partition_record(name: str, index_kind: Any, sort: IntEnum | None = None) -> Callable[[Any], Any]:
	"""
	Class decorator for record shapes stored in their own partition.

	The decorated class gains `SIZE`, `STRUCT`, `unpack_from` and `SPEC`.
	"""

	def wrap(cls: Any) -> Any:
		compile_layout(cls)
		cls.SPEC = partition_spec(name, cls, index_kind, sort)
		return cls

	return wrap


def spec_for_name(name: str) -> PartitionSpec | None:
	return _SPECS_BY_NAME.get(name)


def spec_for_index(index: AbstractIndex) -> PartitionSpec | None:
	"""Return the partition holding records for `index`'s sort, if the reader knows one."""
	return _SPECS_BY_SORT.get((type(index), int(index.sort)))


def registered_specs() -> list[PartitionSpec]:
	return sorted(_SPECS_BY_NAME.values(), key=lambda s: s.slot)


def slot_count() -> int:
	return max((s.slot for s in _SPECS_BY_NAME.values()), default=-1) + 1


def as_spec(target: Any) -> PartitionSpec:
	"""Accept either a PartitionSpec or a record class carrying `SPEC`."""
	if isinstance(target, PartitionSpec):
		return target
	spec = getattr(target, "SPEC", None)
	if isinstance(spec, PartitionSpec):
		return spec
	raise TypeError(f"{target!r} is neither a PartitionSpec nor a partition record type")


__all__ = [
	"FieldCodec",
	"pad",
	"enum_u8",
	"enum_u16",
	"flags_u8",
	"index_codec",
	"nested",
	"U8",
	"U16",
	"U32",
	"U64",
	"F64",
	"BOOL",
	"PAD1",
	"PAD2",
	"PAD3",
	"INDEX",
	"SCOPE",
	"TEXT",
	"DECL",
	"TYPE",
	"EXPR",
	"NAME",
	"CHART",
	"SYNTAX",
	"ATTR",
	"UNIT",
	"LIT",
	"STRING",
	"SEQUENCE",
	"LOCUS",
	"MODULE_REFERENCE",
	"PartitionSpec",
	"register_partition",
	"partition_spec",
	"compile_layout",
	"partition_record",
	"spec_for_name",
	"spec_for_index",
	"registered_specs",
	"slot_count",
	"as_spec",
]
