# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Structured errors raised by the IFC reader.

Three families, kept apart on purpose:
- `CorruptFormat`: the input bytes are not a valid container. Raised only while
  constructing/loading a container.
- `SchemaMismatch`: the container and this reader disagree about a record
  layout or sort. Treated as a contract violation, never caught by
  `except CorruptFormat`.
- lookup failures (`MissingPartition`, `UnknownModule`) for APIs that promise
  a value; the `try_*` variants return `None` instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar


@dataclass(eq=False)
class IfcError(Exception):
	"""
	Base class for reader errors; carries a stable reason code.

	Not frozen: the interpreter and `contextlib` assign `__traceback__` and
	`__context__` on exceptions in flight.
	"""

	REASON_CODE: ClassVar[str] = "ifc-error"

	message: str
	partition: str | None = None
	expected: int | None = None
	got: int | None = None

	def __str__(self) -> str:
		return self.format_human()

	@property
	def reason_code(self) -> str:
		return self.REASON_CODE

	def to_dict(self) -> dict[str, Any]:
		return {
			"reason_code": self.REASON_CODE,
			"message": self.message,
			"partition": self.partition,
			"expected": self.expected,
			"got": self.got,
		}

	def format_human(self) -> str:
		parts: list[str] = [f"[{self.REASON_CODE}] {self.message}"]
		if self.partition is not None:
			parts.append(f"partition={self.partition}")
		if self.expected is not None or self.got is not None:
			parts.append(f"expected={self.expected}")
			parts.append(f"got={self.got}")
		return " ".join(parts)


class CorruptFormat(IfcError, ValueError):
	REASON_CODE: ClassVar[str] = "corrupt-format"


class InvalidSignature(CorruptFormat):
	REASON_CODE: ClassVar[str] = "invalid-signature"


class SizeMismatch(CorruptFormat):
	REASON_CODE: ClassVar[str] = "size-mismatch"


class ChecksumMismatch(CorruptFormat):
	REASON_CODE: ClassVar[str] = "checksum-mismatch"


class SchemaMismatch(IfcError, RuntimeError):
	"""Reader and writer were built against incompatible record layouts."""

	REASON_CODE: ClassVar[str] = "schema-mismatch"


class UnsupportedSort(SchemaMismatch):
	REASON_CODE: ClassVar[str] = "unsupported-sort"


class MissingPartition(IfcError, LookupError):
	REASON_CODE: ClassVar[str] = "missing-partition"


class UnknownModule(IfcError, LookupError):
	REASON_CODE: ClassVar[str] = "unknown-module"


class NoModuleResolver(IfcError, RuntimeError):
	REASON_CODE: ClassVar[str] = "no-module-resolver"


__all__ = [
	"IfcError",
	"CorruptFormat",
	"InvalidSignature",
	"SizeMismatch",
	"ChecksumMismatch",
	"SchemaMismatch",
	"UnsupportedSort",
	"MissingPartition",
	"UnknownModule",
	"NoModuleResolver",
]
