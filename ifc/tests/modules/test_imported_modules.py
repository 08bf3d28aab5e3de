# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import pytest

from ifc.environment import Environment
from ifc.errors import NoModuleResolver, UnknownModule
from ifc.file import File
from ifc.index import DeclIndex, DeclSort, ModuleReference, TextOffset
from ifc.records.declarations import DeclReference
from ifc.test_support import IfcBuilder


def _empty() -> File:
	return File(IfcBuilder().build())


def _importer(env: Environment | None) -> tuple[File, dict[str, TextOffset]]:
	b = IfcBuilder()
	strings = {s: b.add_string(s) for s in ("m", "part", "std.compat")}
	b.add_elements(DeclReference, [(ModuleReference(strings["m"], strings["part"]), DeclIndex(DeclSort.FUNCTION, 4))])
	return File(b.build(), env=env), strings


def test_owner_only_key() -> None:
	env = Environment()
	dep = _empty()
	env.add("m", dep)
	ifc, s = _importer(env)
	assert ifc.get_imported_module(ModuleReference(s["m"], TextOffset(0))) is dep


def test_owner_and_partition_key() -> None:
	env = Environment()
	dep = _empty()
	env.add("m:part", dep)
	ifc, _ = _importer(env)
	ref = ifc.resolve(DeclIndex(DeclSort.REFERENCE, 0))
	assert isinstance(ref, DeclReference)
	assert ref.local_index == DeclIndex(DeclSort.FUNCTION, 4)
	assert ifc.get_imported_module(ref.unit) is dep


def test_global_module_key_is_the_partition_name() -> None:
	env = Environment()
	dep = _empty()
	env.add("std.compat", dep)
	ifc, s = _importer(env)
	assert ifc.get_imported_module(ModuleReference(TextOffset(0), s["std.compat"])) is dep


def test_unknown_module() -> None:
	ifc, s = _importer(Environment())
	with pytest.raises(UnknownModule):
		ifc.get_imported_module(ModuleReference(s["m"], TextOffset(0)))
	with pytest.raises(LookupError):
		ifc.get_imported_module(ModuleReference(s["m"], s["part"]))


def test_without_resolver() -> None:
	ifc, s = _importer(None)
	with pytest.raises(NoModuleResolver):
		ifc.get_imported_module(ModuleReference(s["m"], TextOffset(0)))


def test_environment_registry() -> None:
	env = Environment()
	dep = _empty()
	env.add("a", dep)
	env.add("a", dep)
	assert "a" in env
	assert "b" not in env
	assert list(env) == ["a"]
	assert len(env) == 1
	assert env.get_module_by_name("a") is dep
