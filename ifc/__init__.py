# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Reader for IFC module interface containers.

Layers:
  blob/layout: borrowed bytes, signature, header and table of contents
  index/schema: tagged indices, record layouts and the partition registry
  partition: typed, bounds-checked views over one partition
  records: record shapes of every partition the reader understands
  file: the container (`File`) and `load_ifc`
  navigation: multi-partition queries (scopes, tuples, qualified names)

Public API:
  - File / load_ifc: open and validate a container
  - Environment / ModuleResolver: resolve modules referenced by a container
  - the error families in `ifc.errors`
"""

from .environment import Environment, ModuleResolver
from .errors import (
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
from .file import File, load_ifc
from .partition import Partition

__all__ = [
	"File",
	"load_ifc",
	"Partition",
	"Environment",
	"ModuleResolver",
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
