# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

from ifc.file import File
from ifc.index import AttrIndex, AttrSort, DeclIndex, DeclSort, Sequence, TextOffset
from ifc.records.traits import DECL_ATTRIBUTES, AttributeTrait, DeprecationTrait, FriendshipTrait, SpecializationTrait
from ifc.test_support import IfcBuilder

F1 = DeclIndex(DeclSort.FUNCTION, 1)
F2 = DeclIndex(DeclSort.FUNCTION, 2)
CLS = DeclIndex(DeclSort.SCOPE, 0)
TPL = DeclIndex(DeclSort.TEMPLATE, 0)
UNSEEN = DeclIndex(DeclSort.VARIABLE, 9)

A1 = AttrIndex(AttrSort.BASIC, 0)
A2 = AttrIndex(AttrSort.BASIC, 1)
A3 = AttrIndex(AttrSort.SCOPED, 0)
A4 = AttrIndex(AttrSort.CALLED, 0)


def _with_traits() -> File:
	b = IfcBuilder()
	b.add_elements(AttributeTrait, [(F1, A1), (F2, A2), (F1, A4)])
	b.add_elements(DECL_ATTRIBUTES, [(F1, A3)])
	b.add_elements(DeprecationTrait, [(F2, b.add_string("use f3 instead"))])
	b.add_elements(FriendshipTrait, [(CLS, Sequence(4, 2))])
	b.add_elements(SpecializationTrait, [(TPL, Sequence(1, 3))])
	return File(b.build())


def test_attributes_merge_both_sources_in_scan_order() -> None:
	ifc = _with_traits()
	assert ifc.trait_declaration_attributes(F1) == (A1, A4, A3)
	assert ifc.trait_declaration_attributes(F2) == (A2,)


def test_vendor_attribute_partition_alone() -> None:
	b = IfcBuilder()
	b.add_elements(DECL_ATTRIBUTES, [(F2, A3), (F2, A1)])
	ifc = File(b.build())
	assert ifc.trait_declaration_attributes(F2) == (A3, A1)
	assert ifc.trait_declaration_attributes(F1) == ()


def test_deprecation_text() -> None:
	ifc = _with_traits()
	assert ifc.deprecation_text(F2) == "use f3 instead"
	assert not ifc.trait_deprecation_texts(F2).is_null
	assert ifc.trait_deprecation_texts(F1) == TextOffset(0)
	assert ifc.deprecation_text(F1) is None


def test_friendship_and_specializations() -> None:
	ifc = _with_traits()
	assert ifc.trait_friendship_of_class(CLS) == Sequence(4, 2)
	assert ifc.trait_friendship_of_class(F1) == Sequence()
	assert ifc.trait_template_specializations(TPL) == Sequence(1, 3)
	assert ifc.trait_template_specializations(CLS).is_empty


def test_undeclared_traits_are_empty_not_errors() -> None:
	ifc = _with_traits()
	assert ifc.trait_declaration_attributes(UNSEEN) == ()
	assert ifc.trait_deprecation_texts(UNSEEN).is_null
	assert ifc.trait_friendship_of_class(UNSEEN).is_empty

	bare = File(IfcBuilder().build())
	assert bare.trait_declaration_attributes(F1) == ()
	assert bare.trait_deprecation_texts(F1).is_null
	assert bare.trait_friendship_of_class(CLS) == Sequence()
	assert bare.trait_template_specializations(TPL) == Sequence()


def test_trait_maps_are_built_once() -> None:
	ifc = _with_traits()
	assert ifc.trait_declaration_attributes(F2) == (A2,)
	assert ifc.trait_friendship_of_class(CLS) == Sequence(4, 2)
	ifc._toc.clear()
	assert ifc.trait_declaration_attributes(F1) == (A1, A4, A3)
	assert ifc.trait_friendship_of_class(CLS) == Sequence(4, 2)
