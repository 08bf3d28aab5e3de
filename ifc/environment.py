# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Module resolution boundary.

A container never opens other containers itself. When a declaration is owned
by another module it builds the lookup key (`owner` or `owner:partition`) and
asks a resolver for the already-loaded container.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Dict, Iterator, Protocol

from ifc.errors import UnknownModule

if TYPE_CHECKING:
	from ifc.file import File

logger = logging.getLogger(__name__)


class ModuleResolver(Protocol):
	def get_module_by_name(self, name: str) -> "File":
		...


class Environment:
	"""In-memory resolver: containers registered by module name."""

	def __init__(self) -> None:
		self._modules: Dict[str, "File"] = {}

	def add(self, name: str, ifc: "File") -> None:
		if name in self._modules and self._modules[name] is not ifc:
			logger.debug("ifc: module '%s' re-registered", name)
		self._modules[name] = ifc

	def get_module_by_name(self, name: str) -> "File":
		try:
			return self._modules[name]
		except KeyError:
			raise UnknownModule(f"module '{name}' is not loaded") from None

	def __contains__(self, name: object) -> bool:
		return name in self._modules

	def __iter__(self) -> Iterator[str]:
		return iter(self._modules)

	def __len__(self) -> int:
		return len(self._modules)


__all__ = ["ModuleResolver", "Environment"]
