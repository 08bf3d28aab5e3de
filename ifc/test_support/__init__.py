# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Shared helpers for tests that need IFC containers.

`IfcBuilder` assembles a valid container in memory (string table, partitions,
table of contents, header and checksum) so tests can describe exactly the
partitions they care about instead of shipping binary fixtures.

Layout produced by `build()`:
	signature | header | string table | partitions (in insertion order) | TOC
"""

from __future__ import annotations

import hashlib
import struct
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, Iterable, List, Optional

from ifc.index import AbstractIndex, ModuleReference, Sequence, SourceLocation, TextOffset, UnitIndex
from ifc.layout import CHECKSUM_SIZE, CHECKSUM_START, HEADER_STRUCT, SIGNATURE, SIGNATURE_SIZE, STRUCTURE_SIZE, SUMMARY_STRUCT
from ifc.schema import as_spec

_U32 = struct.Struct("<I")


def flatten(values: Iterable[Any]) -> List[Any]:
	"""
	Lower record field values to the raw values their struct layout packs.

	Tagged indices become their raw u32, pairs (`Sequence`, `SourceLocation`,
	`ModuleReference`) expand to two u32s, enums and flags become ints.
	"""
	out: List[Any] = []
	for value in values:
		if isinstance(value, AbstractIndex):
			out.append(value.raw)
		elif isinstance(value, Sequence):
			out.extend((value.start, value.cardinality))
		elif isinstance(value, SourceLocation):
			out.extend((value.line, value.column))
		elif isinstance(value, ModuleReference):
			out.extend((int(value.owner), int(value.partition)))
		elif isinstance(value, (bool, IntEnum, int)):
			out.append(int(value))
		else:
			out.append(value)
	return out


def pack_record(record_type: Any, *fields: Any) -> bytes:
	"""Pack one record of `record_type` from (possibly typed) field values."""
	return record_type.STRUCT.pack(*flatten(fields))


def pack_element(element: Any, value: Any) -> bytes:
	"""Pack one partition element: a record tuple, a tagged index, a plain index or a Sequence."""
	if hasattr(element, "STRUCT"):
		return pack_record(element, *value)
	if isinstance(value, Sequence):
		return struct.pack("<II", value.start, value.cardinality)
	if isinstance(value, AbstractIndex):
		return _U32.pack(value.raw)
	return _U32.pack(int(value))


@dataclass
class _PendingPartition:
	name: TextOffset
	entry_size: int
	cardinality: int
	data: bytes


class IfcBuilder:
	"""Incrementally describe a container, then `build()` its bytes."""

	def __init__(self) -> None:
		# Offset 0 holds the empty string so the null text offset stays null.
		self._strings = bytearray(b"\0")
		self._offsets: Dict[str, TextOffset] = {"": TextOffset(0)}
		self._partitions: List[_PendingPartition] = []

	def add_string(self, text: str) -> TextOffset:
		found = self._offsets.get(text)
		if found is not None:
			return found
		offset = TextOffset(len(self._strings))
		self._strings += text.encode("utf-8") + b"\0"
		self._offsets[text] = offset
		return offset

	def add_partition(self, name: str, entry_size: int, data: bytes = b"", cardinality: Optional[int] = None) -> None:
		"""Add raw partition bytes; `cardinality` defaults to len(data) / entry_size."""
		if cardinality is None:
			cardinality = len(data) // entry_size if entry_size else 0
		self._partitions.append(_PendingPartition(self.add_string(name), entry_size, cardinality, bytes(data)))

	def add_elements(self, target: Any, values: Iterable[Any], name: Optional[str] = None) -> None:
		"""Add a partition for `target` (a spec or record class) holding `values`."""
		spec = as_spec(target)
		packed = [pack_element(spec.element, value) for value in values]
		self.add_partition(name if name is not None else spec.name, spec.entry_size, b"".join(packed), len(packed))

	def build(
		self,
		*,
		global_scope: int = 0,
		unit: Optional[UnitIndex] = None,
		src_path: str = "",
		signature: bytes = SIGNATURE,
		version: tuple[int, int] = (0, 43),
		checksum: bool = True,
	) -> bytes:
		src = self.add_string(src_path) if src_path else TextOffset(0)
		strings = bytes(self._strings)
		body = bytearray()
		summaries: List[bytes] = []
		cursor = STRUCTURE_SIZE + len(strings)
		for part in self._partitions:
			summaries.append(SUMMARY_STRUCT.pack(int(part.name), cursor, part.cardinality, part.entry_size))
			body += part.data
			cursor += len(part.data)
		toc = cursor
		header = HEADER_STRUCT.pack(
			bytes(CHECKSUM_SIZE),
			version[0],
			version[1],
			0,
			0,
			202002,
			STRUCTURE_SIZE,
			len(strings),
			(unit or UnitIndex.null()).raw,
			int(src),
			global_scope,
			toc,
			len(summaries),
			0,
		)
		blob = bytearray(signature[:SIGNATURE_SIZE].ljust(SIGNATURE_SIZE, b"\0"))
		blob += header + strings + body + b"".join(summaries)
		if checksum:
			blob[SIGNATURE_SIZE:CHECKSUM_START] = hashlib.sha256(blob[CHECKSUM_START:]).digest()
		return bytes(blob)


__all__ = ["IfcBuilder", "flatten", "pack_record", "pack_element"]
