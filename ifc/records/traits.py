# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Association partitions: `{decl, trait}` pairs keyed by declaration.

Traits are sparse. A container only carries a trait partition when at least
one declaration has that trait, and most declarations appear in none.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from ifc.index import AttrIndex, DeclIndex, Index, Sequence, TextOffset
from ifc.schema import ATTR, DECL, SEQUENCE, TEXT, partition_record, partition_spec


@partition_record("trait.attribute", Index)
@dataclass(frozen=True)
class AttributeTrait:
	decl: DeclIndex
	trait: AttrIndex

	LAYOUT: ClassVar = (DECL, ATTR)


# Attributes written on individual declarations (vendor partition, same shape).
DECL_ATTRIBUTES = partition_spec(".msvc.trait.decl-attrs", AttributeTrait, Index)


@partition_record("trait.deprecated", Index)
@dataclass(frozen=True)
class DeprecationTrait:
	decl: DeclIndex
	trait: TextOffset

	LAYOUT: ClassVar = (DECL, TEXT)


@partition_record("trait.friend", Index)
@dataclass(frozen=True)
class FriendshipTrait:
	decl: DeclIndex
	trait: Sequence

	LAYOUT: ClassVar = (DECL, SEQUENCE)


@partition_record("trait.specialization", Index)
@dataclass(frozen=True)
class SpecializationTrait:
	"""Specializations of a template, as a range of `scope.member`."""

	decl: DeclIndex
	trait: Sequence

	LAYOUT: ClassVar = (DECL, SEQUENCE)


__all__ = [
	"AttributeTrait",
	"DECL_ATTRIBUTES",
	"DeprecationTrait",
	"FriendshipTrait",
	"SpecializationTrait",
]
