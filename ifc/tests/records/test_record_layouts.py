# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

import pytest

import ifc.records  # noqa: F401  (registers every partition)
from ifc.index import DeclIndex, DeclSort, Sequence, SourceLocation, TypeBasis
from ifc.records.attributes import AttrBasic, Word, WordSort
from ifc.records.charts import FPLiteral, IntegerLiteral, StringLiteral
from ifc.records.declarations import Declaration, ScopeDeclaration
from ifc.records.traits import DECL_ATTRIBUTES, AttributeTrait, FriendshipTrait
from ifc.records.types import FundamentalType, TypePrecision, TypeSign
from ifc.schema import (
	DECL,
	U32,
	as_spec,
	compile_layout,
	partition_spec,
	registered_specs,
	slot_count,
	spec_for_index,
	spec_for_name,
)
from ifc.test_support import pack_record


def test_known_record_sizes() -> None:
	assert Declaration.SIZE == 4
	assert AttributeTrait.SIZE == 8
	assert FriendshipTrait.SIZE == 12
	assert Word.SIZE == 16
	assert AttrBasic.SIZE == 16
	assert IntegerLiteral.SIZE == 8
	assert FPLiteral.SIZE == 16
	assert StringLiteral.SIZE == 12
	assert FundamentalType.SIZE == 4


def test_every_spec_has_a_unique_slot() -> None:
	specs = registered_specs()
	slots = [s.slot for s in specs]
	assert len(set(slots)) == len(slots)
	assert slot_count() > max(slots)
	for spec in specs:
		assert spec.entry_size > 0


def test_registry_lookup() -> None:
	assert spec_for_name("decl.scope") is ScopeDeclaration.SPEC
	assert spec_for_name(".msvc.trait.decl-attrs") is DECL_ATTRIBUTES
	assert spec_for_name("no.such.partition") is None
	assert spec_for_name("const.str") is StringLiteral.SPEC
	assert spec_for_name("expr.strings") is None
	assert spec_for_index(DeclIndex(DeclSort.SCOPE, 3)) is ScopeDeclaration.SPEC
	assert spec_for_index(DeclIndex(DeclSort.BARREN, 0)) is None
	assert as_spec(ScopeDeclaration) is ScopeDeclaration.SPEC
	assert as_spec(DECL_ATTRIBUTES) is DECL_ATTRIBUTES
	with pytest.raises(TypeError):
		as_spec(int)


def test_duplicate_partition_name_is_rejected() -> None:
	with pytest.raises(ValueError):
		partition_spec("decl.scope", Sequence, DeclIndex)


def test_layout_must_cover_every_field() -> None:
	@dataclass(frozen=True)
	class Broken:
		decl: DeclIndex
		count: int

		LAYOUT: ClassVar = (DECL,)

	with pytest.raises(TypeError):
		compile_layout(Broken)

	@dataclass(frozen=True)
	class Fine:
		decl: DeclIndex
		count: int

		LAYOUT: ClassVar = (DECL, U32)

	compile_layout(Fine)
	assert Fine.SIZE == 8
	assert Fine.unpack_from(pack_record(Fine, DeclIndex(DeclSort.ALIAS, 2), 9)) == Fine(DeclIndex(DeclSort.ALIAS, 2), 9)


def test_nested_record_decodes() -> None:
	data = pack_record(AttrBasic, SourceLocation(3, 4), 17, 2, WordSort.IDENTIFIER)
	assert AttrBasic.unpack_from(data) == AttrBasic(Word(SourceLocation(3, 4), 17, 2, WordSort.IDENTIFIER))


def test_enum_fields_decode_to_members() -> None:
	record = FundamentalType.unpack_from(pack_record(FundamentalType, TypeBasis.NAMESPACE, TypePrecision.DEFAULT, TypeSign.PLAIN))
	assert record.basis is TypeBasis.NAMESPACE
	unknown = FundamentalType.unpack_from(bytes([200, 0, 0, 0]))
	assert unknown.basis == 200


def test_unpack_at_offset() -> None:
	data = b"\xff" * 3 + pack_record(IntegerLiteral, 1 << 40)
	assert IntegerLiteral.unpack_from(data, 3) == IntegerLiteral(1 << 40)
	assert FPLiteral.unpack_from(pack_record(FPLiteral, 1.5, 8)) == FPLiteral(1.5, 8)
