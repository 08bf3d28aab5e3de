# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import pytest

from ifc.errors import CorruptFormat, MissingPartition, SchemaMismatch
from ifc.file import File
from ifc.index import AttrIndex, AttrSort, DeclIndex, DeclSort, Index, ScopeIndex, Sequence, SyntaxIndex, SyntaxSort, TextOffset, TypeIndex, TypeSort
from ifc.records.declarations import Declaration
from ifc.records.heaps import ATTR_HEAP, DEDUCTION_GUIDES, SCOPE_DESCRIPTORS, SYNTAX_HEAP, TYPE_HEAP
from ifc.records.traits import DECL_ATTRIBUTES, AttributeTrait, DeprecationTrait
from ifc.schema import spec_for_name
from ifc.test_support import IfcBuilder

_MEMBERS = [
	DeclIndex(DeclSort.SCOPE, 0),
	DeclIndex(DeclSort.FUNCTION, 3),
	DeclIndex(DeclSort.VARIABLE, 1),
	DeclIndex(DeclSort.FUNCTION, 4),
]


def _container() -> File:
	b = IfcBuilder()
	b.add_elements(SCOPE_DESCRIPTORS, [Sequence(0, 4), Sequence(1, 2)])
	b.add_elements(Declaration, [(m,) for m in _MEMBERS])
	b.add_elements(TYPE_HEAP, [])
	return File(b.build(global_scope=1))


def test_every_toc_entry_is_reachable() -> None:
	ifc = _container()
	toc = ifc.table_of_contents()
	assert set(toc) == {"scope.desc", "scope.member", "heap.type"}
	for name, summary in toc.items():
		part = ifc.try_get_partition(spec_for_name(name))
		assert part is not None
		assert len(part) == summary.cardinality
		assert part.base_offset == summary.offset


def test_table_of_contents_is_read_only() -> None:
	toc = _container().table_of_contents()
	with pytest.raises(TypeError):
		toc["x"] = toc["scope.desc"]  # type: ignore[index]


def test_absent_partition_is_not_an_error_for_try() -> None:
	ifc = _container()
	assert ifc.summary("trait.deprecated") is None
	assert ifc.try_get_partition(DeprecationTrait) is None
	with pytest.raises(MissingPartition) as exc:
		ifc.get_partition(DeprecationTrait)
	assert exc.value.partition == "trait.deprecated"
	with pytest.raises(LookupError):
		ifc.partition(DeprecationTrait)


def test_empty_partition() -> None:
	heap = _container().type_heap()
	assert len(heap) == 0
	assert not heap
	assert list(heap) == []


def test_partition_name_override() -> None:
	b = IfcBuilder()
	b.add_elements(DECL_ATTRIBUTES, [])
	ifc = File(b.build())
	assert ifc.try_get_partition(AttributeTrait) is None
	assert ifc.try_get_partition(AttributeTrait, name=".msvc.trait.decl-attrs") is not None
	assert ifc.try_get_partition(DECL_ATTRIBUTES) is not None


def test_aliased_partition_reports_its_toc_name() -> None:
	b = IfcBuilder()
	b.add_elements(DECL_ATTRIBUTES, [])
	b.add_partition("trait.deprecated", 4, bytes(8))
	ifc = File(b.build())
	attrs = ifc.get_partition(AttributeTrait, name=".msvc.trait.decl-attrs")
	assert attrs.name == ".msvc.trait.decl-attrs"
	assert attrs.spec.name == "trait.attribute"
	with pytest.raises(IndexError, match=r"\.msvc\.trait\.decl-attrs"):
		attrs[0]
	with pytest.raises(SchemaMismatch) as exc:
		ifc.get_partition(AttributeTrait, name="trait.deprecated")
	assert exc.value.partition == "trait.deprecated"


def test_duplicate_toc_entry_keeps_the_first() -> None:
	b = IfcBuilder()
	b.add_elements(SCOPE_DESCRIPTORS, [Sequence(0, 0)])
	b.add_elements(SCOPE_DESCRIPTORS, [Sequence(0, 0), Sequence(0, 0)])
	ifc = File(b.build(global_scope=1))
	assert len(ifc.scope_descriptors()) == 1


def test_partition_name_outside_string_table_is_corrupt() -> None:
	b = IfcBuilder()
	b.add_elements(SCOPE_DESCRIPTORS, [])
	data = bytearray(b.build())
	# Point the only TOC entry's name past the end of the string table.
	toc_at = len(data) - 16
	data[toc_at : toc_at + 4] = (1 << 20).to_bytes(4, "little")
	with pytest.raises(CorruptFormat):
		File(bytes(data))


def test_element_size_disagreement_is_a_schema_mismatch() -> None:
	b = IfcBuilder()
	b.add_partition("scope.desc", 12, bytes(24))
	ifc = File(b.build())
	with pytest.raises(SchemaMismatch) as exc:
		ifc.scope_descriptors()
	assert (exc.value.expected, exc.value.got) == (8, 12)
	assert exc.value.partition == "scope.desc"
	assert not isinstance(exc.value, CorruptFormat)


def test_repeated_access_reuses_the_cached_location() -> None:
	ifc = _container()
	first = ifc.declarations()
	ifc._toc.clear()
	second = ifc.declarations()
	assert (second.base_offset, len(second)) == (first.base_offset, len(first))
	assert list(second) == list(first)
	assert ifc.try_get_partition(Declaration) is None


def test_slice_returns_the_requested_run() -> None:
	members = _container().declarations()
	part = members.slice(Sequence(1, 2))
	assert [d.index for d in part] == _MEMBERS[1:3]
	assert part[0].index == _MEMBERS[1]
	empty = members.slice(Sequence(4, 0))
	assert len(empty) == 0
	assert list(empty) == []
	with pytest.raises(IndexError):
		members.slice(Sequence(3, 2))


def test_scope_descriptor_lookup_is_one_based() -> None:
	ifc = _container()
	scopes = ifc.scope_descriptors()
	assert scopes[ScopeIndex(2)] == Sequence(1, 2)
	assert scopes[1] == Sequence(1, 2)
	with pytest.raises(IndexError):
		scopes[ScopeIndex(0)]
	with pytest.raises(IndexError):
		scopes[ScopeIndex(3)]


def test_keys_are_checked_by_kind() -> None:
	members = _container().declarations()
	assert members[Index(3)].index == _MEMBERS[3]
	with pytest.raises(IndexError):
		members[Index(4)]
	with pytest.raises(IndexError):
		members[-1]
	with pytest.raises(TypeError):
		members[ScopeIndex(1)]
	with pytest.raises(TypeError):
		members[TypeIndex(TypeSort.POINTER, 0)]
	with pytest.raises(TypeError):
		members[TextOffset(0)]


def test_named_heap_accessors() -> None:
	b = IfcBuilder()
	b.add_elements(ATTR_HEAP, [AttrIndex(AttrSort.BASIC, 2)])
	b.add_elements(SYNTAX_HEAP, [SyntaxIndex(SyntaxSort.TYPE_ID, 1), SyntaxIndex(SyntaxSort.TUPLE, 0)])
	b.add_elements(DEDUCTION_GUIDES, [DeclIndex(DeclSort.FUNCTION, 7)])
	ifc = File(b.build())
	assert list(ifc.attr_heap()) == [AttrIndex(AttrSort.BASIC, 2)]
	assert ifc.syntax_heap()[1] == SyntaxIndex(SyntaxSort.TUPLE, 0)
	assert list(ifc.deduction_guides()) == [DeclIndex(DeclSort.FUNCTION, 7)]
