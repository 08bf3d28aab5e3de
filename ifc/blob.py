# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Read-only, non-owning view over the bytes of one IFC container.

The view borrows the caller's buffer: nothing is copied. Holding a
`memoryview` pins resizable exporters (`bytearray`, `mmap`) for as long as the
view is alive, and `release()` makes every later access fail loudly instead of
reading stale memory.
"""

from __future__ import annotations

import struct
from typing import Any

_NUL = b"\0"
_SCAN_CHUNK = 256


class BlobView:
	"""Bounds-known view over caller-supplied bytes."""

	__slots__ = ("_obj", "_view")

	def __init__(self, data: Any) -> None:
		view = memoryview(data)
		if view.ndim != 1 or view.itemsize != 1:
			view = view.cast("B")
		self._obj = data
		self._view = view.toreadonly()

	def __len__(self) -> int:
		return self._view.nbytes

	@property
	def view(self) -> memoryview:
		return self._view

	@property
	def released(self) -> bool:
		try:
			self._view.nbytes
		except ValueError:
			return True
		return False

	def release(self) -> None:
		self._view.release()

	def unpack_from(self, layout: struct.Struct, offset: int) -> tuple[Any, ...]:
		return layout.unpack_from(self._view, offset)

	def find_nul(self, start: int) -> int:
		"""
		Return the position of the first NUL byte at or after `start`.

		Returns the blob length when the text runs to the end of the blob.
		"""
		end = len(self)
		if start < 0 or start > end:
			raise IndexError(f"text offset {start} outside blob of {end} bytes")
		finder = getattr(self._obj, "find", None)
		if finder is not None and not isinstance(self._obj, memoryview):
			pos = finder(_NUL, start, end)
			return end if pos < 0 else pos
		pos = start
		while pos < end:
			chunk = self._view[pos : min(pos + _SCAN_CHUNK, end)].tobytes()
			hit = chunk.find(_NUL)
			if hit >= 0:
				return pos + hit
			pos += len(chunk)
		return end

	def text_at(self, start: int) -> str:
		"""Decode the NUL-terminated UTF-8 text beginning at `start`."""
		stop = self.find_nul(start)
		return str(self._view[start:stop], "utf-8", "replace")


__all__ = ["BlobView"]
