# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
IFC container.

A `File` borrows a caller-owned buffer, validates it once, indexes its table
of contents by name, and hands out typed partition views over it.

Construction either yields a fully valid container or raises a
`CorruptFormat` subclass:
1. the first four bytes must be the IFC signature,
2. header prefix + string table + TOC + every partition must add up to the
   buffer length exactly.

Everything after construction is lazy. Partition locations are memoized per
`PartitionSpec` slot and the trait maps are built on first query. Each lazy
value is built locally and published with one assignment, so concurrent first
touches may repeat work but never observe a half-built cache.
"""

from __future__ import annotations

import hashlib
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple

from ifc.blob import BlobView
from ifc.errors import ChecksumMismatch, CorruptFormat, MissingPartition, NoModuleResolver, SchemaMismatch, SizeMismatch, UnsupportedSort
from ifc.index import (
	AbstractIndex,
	AttrIndex,
	DeclIndex,
	ModuleReference,
	Sequence,
	TextOffset,
	UnitSort,
)
from ifc.layout import (
	CHECKSUM_START,
	FileHeader,
	PartitionSummary,
	check_blob_size,
	read_header,
	read_signature,
	read_table_of_contents,
)
from ifc.partition import Partition
from ifc.records.charts import StringLiteral
from ifc.records.declarations import Declaration
from ifc.records.heaps import ATTR_HEAP, DEDUCTION_GUIDES, EXPR_HEAP, SCOPE_DESCRIPTORS, SYNTAX_HEAP, TYPE_HEAP
from ifc.records.traits import DECL_ATTRIBUTES, AttributeTrait, DeprecationTrait, FriendshipTrait, SpecializationTrait
from ifc.schema import PartitionSpec, as_spec, slot_count, spec_for_index

logger = logging.getLogger(__name__)

# Scanned in this order; attributes of one declaration accumulate across both.
ATTRIBUTE_TRAIT_SOURCES: Tuple[PartitionSpec, ...] = (AttributeTrait.SPEC, DECL_ATTRIBUTES)


class File:
	"""One loaded IFC container."""

	def __init__(self, data: Any, env: Any = None) -> None:
		blob = BlobView(data)
		try:
			self._index(blob)
		except BaseException:
			# A rejected buffer must not stay exported through the traceback.
			blob.release()
			raise
		self.env = env

		self._slots: List[Optional[Tuple[int, int]]] = [None] * slot_count()
		self._attributes_by_decl: Optional[Dict[DeclIndex, Tuple[AttrIndex, ...]]] = None
		self._deprecations_by_decl: Optional[Dict[DeclIndex, TextOffset]] = None
		self._friendships_by_decl: Optional[Dict[DeclIndex, Sequence]] = None
		self._specializations_by_decl: Optional[Dict[DeclIndex, Sequence]] = None
		logger.debug("ifc: loaded container of %d bytes with %d partitions", len(blob), len(self._toc))

	def _index(self, blob: BlobView) -> None:
		read_signature(blob)
		header = read_header(blob)
		summaries = read_table_of_contents(blob, header)
		check_blob_size(blob, header, summaries)
		_check_regions(blob, header, summaries)

		self._blob = blob
		self._header = header

		toc: Dict[str, PartitionSummary] = {}
		for summary in summaries:
			if summary.name >= header.string_table_size:
				raise CorruptFormat(
					"partition name lies outside the string table",
					expected=header.string_table_size,
					got=int(summary.name),
				)
			name = self.get_string(summary.name)
			if name in toc:
				logger.debug("ifc: duplicate TOC entry for partition '%s' ignored", name)
				continue
			toc[name] = summary
		self._toc = toc

	# -- header and strings ----------------------------------------------

	@property
	def header(self) -> FileHeader:
		return self._header

	@property
	def blob(self) -> BlobView:
		return self._blob

	def get_string(self, offset: TextOffset | int) -> str:
		"""Text at `offset` in the string table, up to its NUL terminator."""
		offset = int(offset)
		size = self._header.string_table_size
		if size == 0 and offset == 0:
			return ""
		if not 0 <= offset < size:
			raise IndexError(f"text offset {offset} outside string table of {size} bytes")
		return self._blob.text_at(self._header.string_table_bytes + offset)

	def try_get_string(self, offset: TextOffset | int) -> Optional[str]:
		if int(offset) == 0:
			return None
		return self.get_string(offset)

	# -- table of contents and partitions --------------------------------

	def table_of_contents(self) -> Mapping[str, PartitionSummary]:
		return MappingProxyType(self._toc)

	def summary(self, name: str) -> Optional[PartitionSummary]:
		return self._toc.get(name)

	def _view(self, spec: PartitionSpec, summary: PartitionSummary, name: str) -> Partition[Any]:
		if summary.entry_size != spec.entry_size:
			raise SchemaMismatch(
				f"element size of '{name}' disagrees with {getattr(spec.element, '__name__', spec.element)}",
				partition=name,
				expected=spec.entry_size,
				got=summary.entry_size,
			)
		return Partition(spec, self._blob.view, summary.offset, summary.cardinality, name)

	def try_get_partition(self, target: Any, name: Optional[str] = None) -> Optional[Partition[Any]]:
		"""Partition named `name` (default: the PartitionSpec's own name), or None when absent."""
		spec = as_spec(target)
		if name is None:
			name = spec.name
		summary = self._toc.get(name)
		if summary is None:
			return None
		return self._view(spec, summary, name)

	def get_partition(self, target: Any, name: Optional[str] = None) -> Partition[Any]:
		spec = as_spec(target)
		found = self.try_get_partition(spec, name)
		if found is None:
			raise MissingPartition(
				f"container has no partition '{name if name is not None else spec.name}'",
				partition=name if name is not None else spec.name,
			)
		return found

	def partition(self, target: Any) -> Partition[Any]:
		"""
		Slot-cached view over the partition a PartitionSpec names.

		The first call resolves the location through the TOC; later calls
		rebuild the view from the cached (offset, count) pair.
		"""
		spec = as_spec(target)
		slots = self._slots
		if spec.slot >= len(slots):
			slots.extend([None] * (spec.slot + 1 - len(slots)))
		cached = slots[spec.slot]
		if cached is not None:
			return Partition(spec, self._blob.view, cached[0], cached[1])
		view = self.get_partition(spec)
		slots[spec.slot] = (view.base_offset, len(view))
		logger.debug("ifc: partition '%s' cached in slot %d (%d elements)", spec.name, spec.slot, len(view))
		return view

	def declarations(self) -> Partition[Declaration]:
		return self.partition(Declaration)

	def scope_descriptors(self) -> Partition[Sequence]:
		return self.partition(SCOPE_DESCRIPTORS)

	def global_scope(self) -> Sequence:
		"""Member range of the unit's global scope."""
		return self.scope_descriptors()[self._header.global_scope]

	def type_heap(self) -> Partition[Any]:
		return self.partition(TYPE_HEAP)

	def expr_heap(self) -> Partition[Any]:
		return self.partition(EXPR_HEAP)

	def attr_heap(self) -> Partition[Any]:
		return self.partition(ATTR_HEAP)

	def syntax_heap(self) -> Partition[Any]:
		return self.partition(SYNTAX_HEAP)

	def deduction_guides(self) -> Partition[DeclIndex]:
		return self.partition(DEDUCTION_GUIDES)

	def string_literals(self) -> Partition[StringLiteral]:
		return self.partition(StringLiteral)

	# -- tagged index resolution -----------------------------------------

	def resolve(self, index: AbstractIndex) -> Any:
		"""
		Decode the record a tagged index designates.

		The sort picks the partition; the position picks the element. A null
		index resolves to None.
		"""
		if index.is_null:
			return None
		spec = spec_for_index(index)
		if spec is None:
			raise UnsupportedSort(f"no record shape is known for {index!r}", got=int(index.sort))
		return self.partition(spec)[index]

	def resolve_heap(self, heap: Any, sequence: Sequence) -> List[Any]:
		"""Resolve every tagged entry of `heap[sequence]`, in heap order."""
		if sequence.is_empty:
			return []
		return [self.resolve(entry) for entry in self.partition(heap).slice(sequence)]

	# -- trait maps -------------------------------------------------------

	def _declaration_attributes(self) -> Dict[DeclIndex, Tuple[AttrIndex, ...]]:
		found = self._attributes_by_decl
		if found is not None:
			return found
		merged: Dict[DeclIndex, List[AttrIndex]] = {}
		for spec in ATTRIBUTE_TRAIT_SOURCES:
			records = self.try_get_partition(spec)
			if records is None:
				continue
			for record in records:
				merged.setdefault(record.decl, []).append(record.trait)
		found = {decl: tuple(attrs) for decl, attrs in merged.items()}
		logger.debug("ifc: attribute trait map built for %d declarations", len(found))
		self._attributes_by_decl = found
		return found

	def _associations(self, spec: PartitionSpec) -> Dict[DeclIndex, Any]:
		out: Dict[DeclIndex, Any] = {}
		records = self.try_get_partition(spec)
		if records is not None:
			for record in records:
				out[record.decl] = record.trait
		logger.debug("ifc: trait map '%s' built with %d entries", spec.name, len(out))
		return out

	def trait_declaration_attributes(self, decl: DeclIndex) -> Tuple[AttrIndex, ...]:
		return self._declaration_attributes().get(decl, ())

	def trait_deprecation_texts(self, decl: DeclIndex) -> TextOffset:
		found = self._deprecations_by_decl
		if found is None:
			found = self._associations(DeprecationTrait.SPEC)
			self._deprecations_by_decl = found
		return found.get(decl, TextOffset(0))

	def trait_friendship_of_class(self, decl: DeclIndex) -> Sequence:
		found = self._friendships_by_decl
		if found is None:
			found = self._associations(FriendshipTrait.SPEC)
			self._friendships_by_decl = found
		return found.get(decl, Sequence())

	def trait_template_specializations(self, decl: DeclIndex) -> Sequence:
		found = self._specializations_by_decl
		if found is None:
			found = self._associations(SpecializationTrait.SPEC)
			self._specializations_by_decl = found
		return found.get(decl, Sequence())

	def deprecation_text(self, decl: DeclIndex) -> Optional[str]:
		return self.try_get_string(self.trait_deprecation_texts(decl))

	# -- modules ----------------------------------------------------------

	def get_imported_module(self, module: ModuleReference) -> "File":
		"""
		Container that owns a declaration referenced through `decl.reference`.

		Global-module entities are looked up by their partition name alone;
		everything else by `owner` or `owner:partition`.
		"""
		if self.env is None:
			raise NoModuleResolver("container was loaded without a module resolver")
		if module.owner.is_null:
			name = self.get_string(module.partition)
		else:
			name = self.get_string(module.owner)
			if not module.partition.is_null:
				name = f"{name}:{self.get_string(module.partition)}"
		logger.debug("ifc: resolving imported module '%s'", name)
		return self.env.get_module_by_name(name)

	def unit_name(self) -> Optional[str]:
		"""Name of the unit this container describes (None for an unnamed unit)."""
		return self.try_get_string(TextOffset(self._header.unit.index))

	def is_primary_unit(self) -> bool:
		return self._header.unit.sort == UnitSort.PRIMARY

	# -- integrity and lifetime -------------------------------------------

	def compute_checksum(self) -> bytes:
		h = hashlib.sha256()
		h.update(self._blob.view[CHECKSUM_START:])
		return h.digest()

	def verify_checksum(self) -> bool:
		ok = self.compute_checksum() == self._header.checksum
		logger.debug("ifc: checksum %s", "ok" if ok else "mismatch")
		return ok

	def close(self) -> None:
		"""Release the borrowed buffer; later reads through this container fail."""
		self._blob.release()

	def __enter__(self) -> "File":
		return self

	def __exit__(self, exc_type, exc, tb) -> None:
		self.close()

	def __repr__(self) -> str:
		return f"File({len(self._toc)} partitions, unit={self._header.unit!r})"


def _check_regions(blob: BlobView, header: FileHeader, summaries: List[PartitionSummary]) -> None:
	"""Every region the header or TOC names must lie inside the blob."""
	size = len(blob)
	end = header.string_table_bytes + header.string_table_size
	if end > size:
		raise SizeMismatch("string table runs past the end of the blob", expected=end, got=size)
	for summary in summaries:
		end = summary.offset + summary.size_bytes
		if end > size:
			raise SizeMismatch("partition runs past the end of the blob", expected=end, got=size)


def load_ifc(path: Path | str, *, env: Any = None, verify_checksum: bool = False) -> File:
	"""Read an `.ifc` file from disk and construct a container over its bytes."""
	data = Path(path).read_bytes()
	ifc = File(data, env=env)
	if verify_checksum and not ifc.verify_checksum():
		raise ChecksumMismatch(f"checksum mismatch in {path}: header has {ifc.header.checksum.hex()}, content hashes to {ifc.compute_checksum().hex()}")
	return ifc


__all__ = ["File", "ATTRIBUTE_TRAIT_SOURCES", "load_ifc"]
