# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import contextlib
from typing import Iterator

import pytest

from ifc.errors import (
	ChecksumMismatch,
	CorruptFormat,
	IfcError,
	InvalidSignature,
	MissingPartition,
	NoModuleResolver,
	SchemaMismatch,
	SizeMismatch,
	UnknownModule,
	UnsupportedSort,
)
from ifc.file import File


def test_format_human() -> None:
	err = SizeMismatch("declared sizes do not add up", expected=112, got=113)
	assert err.format_human() == "[size-mismatch] declared sizes do not add up expected=112 got=113"
	assert str(err) == err.format_human()
	assert str(SchemaMismatch("bad layout", partition="scope.desc")) == "[schema-mismatch] bad layout partition=scope.desc"


def test_to_dict() -> None:
	err = MissingPartition("absent", partition="heap.type")
	assert err.to_dict() == {
		"reason_code": "missing-partition",
		"message": "absent",
		"partition": "heap.type",
		"expected": None,
		"got": None,
	}
	assert err.reason_code == "missing-partition"


def test_families() -> None:
	for cls in (InvalidSignature, SizeMismatch, ChecksumMismatch):
		assert issubclass(cls, CorruptFormat)
		assert issubclass(cls, ValueError)
	assert issubclass(UnsupportedSort, SchemaMismatch)
	assert not issubclass(SchemaMismatch, CorruptFormat)
	assert issubclass(SchemaMismatch, RuntimeError)
	assert issubclass(MissingPartition, LookupError)
	assert issubclass(UnknownModule, LookupError)
	assert issubclass(NoModuleResolver, RuntimeError)
	for cls in (CorruptFormat, SchemaMismatch, MissingPartition, UnknownModule, NoModuleResolver):
		assert issubclass(cls, IfcError)


def test_errors_are_raisable() -> None:
	err = InvalidSignature("bad magic")
	with pytest.raises(CorruptFormat, match="invalid-signature"):
		raise err
	assert err.__traceback__ is not None


@contextlib.contextmanager
def _guarded() -> Iterator[None]:
	yield


def test_errors_survive_generator_context_managers() -> None:
	with pytest.raises(CorruptFormat) as exc:
		with _guarded():
			File(b"nope")
	assert type(exc.value) is InvalidSignature


def test_errors_survive_exit_stack() -> None:
	with pytest.raises(SizeMismatch):
		with contextlib.ExitStack() as stack:
			stack.enter_context(_guarded())
			raise SizeMismatch("declared sizes do not add up", expected=1, got=2)


def test_errors_compare_by_identity() -> None:
	first = MissingPartition("absent", partition="heap.type")
	second = MissingPartition("absent", partition="heap.type")
	assert first != second
	assert len({first, second}) == 2
