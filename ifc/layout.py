# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Fixed byte layout of an IFC container.

Layout:
	signature(4) | FileHeader(72) | string table | partitions | TOC

Only the signature and the header sit at fixed positions; the string table,
the TOC and every partition are located through byte offsets recorded in the
header and in the TOC. The order of the variable regions is up to the writer.

FileHeader layout:
	checksum(32), major_version(u8), minor_version(u8), abi(u8), arch(u8),
	cplusplus(u32), string_table_bytes(u32), string_table_size(u32),
	unit(u32), src_path(u32), global_scope(u32), toc(u32),
	partition_count(u32), internal_partition(u8), padding(3)

PartitionSummary layout (16 bytes):
	name(u32 text offset), offset(u32), cardinality(u32), entry_size(u32)
"""

from __future__ import annotations

import struct
from dataclasses import dataclass

from ifc.blob import BlobView
from ifc.errors import InvalidSignature, SizeMismatch
from ifc.index import ScopeIndex, TextOffset, UnitIndex

SIGNATURE = bytes((0x54, 0x51, 0x45, 0x1A))

_SIGNATURE_STRUCT = struct.Struct("<4s")
HEADER_STRUCT = struct.Struct("<32sBBBBIIIIIIIIB3x")
SUMMARY_STRUCT = struct.Struct("<IIII")

SIGNATURE_SIZE = _SIGNATURE_STRUCT.size
CHECKSUM_SIZE = 32
HEADER_SIZE = HEADER_STRUCT.size
STRUCTURE_SIZE = SIGNATURE_SIZE + HEADER_SIZE
PARTITION_SUMMARY_SIZE = SUMMARY_STRUCT.size

# First byte covered by the header checksum.
CHECKSUM_START = SIGNATURE_SIZE + CHECKSUM_SIZE


@dataclass(frozen=True)
class FileHeader:
	checksum: bytes
	major_version: int
	minor_version: int
	abi: int
	arch: int
	cplusplus: int
	string_table_bytes: int
	string_table_size: int
	unit: UnitIndex
	src_path: TextOffset
	global_scope: ScopeIndex
	toc: int
	partition_count: int
	internal_partition: bool

	@property
	def toc_size(self) -> int:
		return self.partition_count * PARTITION_SUMMARY_SIZE


@dataclass(frozen=True)
class PartitionSummary:
	"""Where one named partition lives and how its elements are sized."""

	name: TextOffset
	offset: int
	cardinality: int
	entry_size: int

	@property
	def size_bytes(self) -> int:
		return self.cardinality * self.entry_size


def read_signature(blob: BlobView) -> bytes:
	if len(blob) < SIGNATURE_SIZE:
		raise InvalidSignature(
			f"blob of {len(blob)} bytes is too short to hold a signature",
			expected=SIGNATURE_SIZE,
			got=len(blob),
		)
	(signature,) = blob.unpack_from(_SIGNATURE_STRUCT, 0)
	if signature != SIGNATURE:
		raise InvalidSignature(f"corrupted file signature {signature.hex()}, expected {SIGNATURE.hex()}")
	return signature


def read_header(blob: BlobView) -> FileHeader:
	"""Decode the header that follows the signature (signature must be checked first)."""
	if len(blob) < STRUCTURE_SIZE:
		raise SizeMismatch(
			"blob is too short to hold the file header",
			expected=STRUCTURE_SIZE,
			got=len(blob),
		)
	(
		checksum,
		major_version,
		minor_version,
		abi,
		arch,
		cplusplus,
		string_table_bytes,
		string_table_size,
		unit,
		src_path,
		global_scope,
		toc,
		partition_count,
		internal_partition,
	) = blob.unpack_from(HEADER_STRUCT, SIGNATURE_SIZE)
	return FileHeader(
		checksum=checksum,
		major_version=major_version,
		minor_version=minor_version,
		abi=abi,
		arch=arch,
		cplusplus=cplusplus,
		string_table_bytes=string_table_bytes,
		string_table_size=string_table_size,
		unit=UnitIndex.from_raw(unit),
		src_path=TextOffset(src_path),
		global_scope=ScopeIndex(global_scope),
		toc=toc,
		partition_count=partition_count,
		internal_partition=bool(internal_partition),
	)


def read_table_of_contents(blob: BlobView, header: FileHeader) -> list[PartitionSummary]:
	end = header.toc + header.toc_size
	if end > len(blob):
		raise SizeMismatch(
			f"table of contents [{header.toc}, {end}) runs past the end of the blob",
			expected=end,
			got=len(blob),
		)
	summaries: list[PartitionSummary] = []
	for i in range(header.partition_count):
		name, offset, cardinality, entry_size = blob.unpack_from(SUMMARY_STRUCT, header.toc + i * PARTITION_SUMMARY_SIZE)
		summaries.append(PartitionSummary(name=TextOffset(name), offset=offset, cardinality=cardinality, entry_size=entry_size))
	return summaries


def expected_blob_size(header: FileHeader, summaries: list[PartitionSummary]) -> int:
	"""Total size implied by the header and TOC; must equal the blob length."""
	total = STRUCTURE_SIZE + header.string_table_size + header.toc_size
	for summary in summaries:
		total += summary.size_bytes
	return total


def check_blob_size(blob: BlobView, header: FileHeader, summaries: list[PartitionSummary]) -> None:
	expected = expected_blob_size(header, summaries)
	if expected != len(blob):
		raise SizeMismatch("corrupted file: declared sizes do not add up to the blob length", expected=expected, got=len(blob))


__all__ = [
	"SIGNATURE",
	"SIGNATURE_SIZE",
	"CHECKSUM_SIZE",
	"CHECKSUM_START",
	"HEADER_SIZE",
	"HEADER_STRUCT",
	"SUMMARY_STRUCT",
	"STRUCTURE_SIZE",
	"PARTITION_SUMMARY_SIZE",
	"FileHeader",
	"PartitionSummary",
	"read_signature",
	"read_header",
	"read_table_of_contents",
	"expected_blob_size",
	"check_blob_size",
]
