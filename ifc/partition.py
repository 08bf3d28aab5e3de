# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Typed, read-only views over one partition of a container.

A `Partition` is (spec, blob view, base offset, count). Elements are decoded on
access; nothing is copied out of the blob up front. Keys are checked
nominally: a partition indexed by `DeclIndex` refuses a `TypeIndex`, and a
partition of one sort refuses tagged keys of another sort. A bare `int` is
always accepted as a raw position.
"""

from __future__ import annotations

from typing import Any, Generic, Iterator, TypeVar

from ifc.index import AbstractIndex, Sequence
from ifc.schema import PartitionSpec

T = TypeVar("T")


class Partition(Generic[T]):
	__slots__ = ("spec", "_view", "base_offset", "_count", "_name")

	def __init__(self, spec: PartitionSpec, view: memoryview, base_offset: int, count: int, name: str | None = None) -> None:
		self.spec = spec
		self._name = name if name is not None else spec.name
		self._view = view
		self.base_offset = base_offset
		self._count = count

	@property
	def name(self) -> str:
		"""TOC name the view was located by; differs from `spec.name` for aliased partitions."""
		return self._name

	@property
	def index_kind(self) -> Any:
		return self.spec.index_kind

	@property
	def entry_size(self) -> int:
		return self.spec.element.SIZE

	@property
	def size_bytes(self) -> int:
		return self._count * self.entry_size

	def __len__(self) -> int:
		return self._count

	def __bool__(self) -> bool:
		return self._count > 0

	def _position(self, key: Any) -> int:
		if type(key) is int:
			return key
		kind = self.spec.index_kind
		if not isinstance(key, kind):
			raise TypeError(f"partition '{self.name}' is indexed by {kind.__name__}, not {type(key).__name__}")
		if isinstance(key, AbstractIndex) and self.spec.sort is not None and int(key.sort) != int(self.spec.sort):
			raise ValueError(f"partition '{self.name}' holds {self.spec.sort!r} records, got index {key!r}")
		return kind.position(key)

	def __getitem__(self, key: Any) -> T:
		pos = self._position(key)
		if not 0 <= pos < self._count:
			raise IndexError(f"position {pos} out of range for partition '{self.name}' of {self._count} elements")
		return self.spec.element.unpack_from(self._view, self.base_offset + pos * self.entry_size)

	def __iter__(self) -> Iterator[T]:
		unpack = self.spec.element.unpack_from
		size = self.entry_size
		for pos in range(self._count):
			yield unpack(self._view, self.base_offset + pos * size)

	def slice(self, sequence: Sequence) -> "Partition[T]":
		"""Contiguous sub-view over [start, start + cardinality)."""
		start = int(sequence.start)
		count = int(sequence.cardinality)
		if start < 0 or count < 0 or start + count > self._count:
			raise IndexError(
				f"sequence [{start}, {start + count}) out of range for partition '{self.name}' of {self._count} elements"
			)
		return Partition(self.spec, self._view, self.base_offset + start * self.entry_size, count, self._name)

	def __repr__(self) -> str:
		return f"Partition({self.name!r}, offset={self.base_offset}, count={self._count})"


__all__ = ["Partition"]
