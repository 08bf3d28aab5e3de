# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Index kinds of the IFC format.

Every cross-reference in a container is a 32-bit value. Abstract ("tagged")
indices pack a sort in the low bits and a position in the high bits:

	raw = (position << SORT_BITS) | sort

so the sort says *which* partition family the position addresses. Plain index
kinds (`Index`, `ScopeIndex`, `TextOffset`) carry a bare position. All kinds are
distinct Python types so a partition can refuse keys of the wrong kind.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import Any, ClassVar, Type

_U32 = struct.Struct("<I")
_SEQUENCE = struct.Struct("<II")


def coerce_enum(enum_type: Type[IntEnum], value: int) -> IntEnum | int:
	"""Map `value` onto `enum_type`, keeping unknown values as plain ints."""
	try:
		return enum_type(value)
	except ValueError:
		return value


class DeclSort(IntEnum):
	VENDOR_EXTENSION = 0
	ENUMERATOR = 1
	VARIABLE = 2
	PARAMETER = 3
	FIELD = 4
	BITFIELD = 5
	SCOPE = 6
	ENUMERATION = 7
	ALIAS = 8
	TEMPLOID = 9
	TEMPLATE = 10
	PARTIAL_SPECIALIZATION = 11
	SPECIALIZATION = 12
	DEFAULT_ARGUMENT = 13
	CONCEPT = 14
	FUNCTION = 15
	METHOD = 16
	CONSTRUCTOR = 17
	INHERITED_CONSTRUCTOR = 18
	DESTRUCTOR = 19
	REFERENCE = 20
	USING = 21
	PROLONGATION = 22
	FRIEND = 23
	EXPANSION = 24
	DEDUCTION_GUIDE = 25
	BARREN = 26
	TUPLE = 27
	SYNTAX_TREE = 28
	INTRINSIC = 29
	PROPERTY = 30
	OUTPUT_SEGMENT = 31


class TypeSort(IntEnum):
	VENDOR_EXTENSION = 0
	FUNDAMENTAL = 1
	DESIGNATED = 2
	TOR = 3
	SYNTACTIC = 4
	EXPANSION = 5
	POINTER = 6
	POINTER_TO_MEMBER = 7
	LVALUE_REFERENCE = 8
	RVALUE_REFERENCE = 9
	FUNCTION = 10
	METHOD = 11
	ARRAY = 12
	TYPENAME = 13
	QUALIFIED = 14
	BASE = 15
	DECLTYPE = 16
	PLACEHOLDER = 17
	TUPLE = 18
	FORALL = 19
	UNALIGNED = 20
	SYNTAX_TREE = 21


class ExprSort(IntEnum):
	VENDOR_EXTENSION = 0
	EMPTY = 1
	LITERAL = 2
	LAMBDA = 3
	TYPE = 4
	NAMED_DECL = 5
	UNRESOLVED_ID = 6
	TEMPLATE_ID = 7
	UNQUALIFIED_ID = 8
	SIMPLE_IDENTIFIER = 9
	POINTER = 10
	QUALIFIED_NAME = 11
	PATH = 12
	READ = 13
	MONAD = 14
	DYAD = 15
	TRIAD = 16
	STRING = 17
	TEMPORARY = 18
	CALL = 19
	MEMBER_INITIALIZER = 20
	MEMBER_ACCESS = 21
	INHERITANCE_PATH = 22
	INITIALIZER_LIST = 23
	CAST = 24
	CONDITION = 25
	EXPRESSION_LIST = 26
	SIZEOF_TYPE = 27
	ALIGNOF = 28
	LABEL = 29
	UNUSED_SORT0 = 30
	TYPEID = 31
	DESTRUCTOR_CALL = 32
	SYNTAX_TREE = 33
	FUNCTION_STRING = 34
	COMPOUND_STRING = 35
	STRING_SEQUENCE = 36
	INITIALIZER = 37
	REQUIRES = 38
	UNARY_FOLD = 39
	BINARY_FOLD = 40
	HIERARCHY_CONVERSION = 41
	PRODUCT_TYPE_VALUE = 42
	SUM_TYPE_VALUE = 43
	UNUSED_SORT1 = 44
	ARRAY_VALUE = 45
	DYNAMIC_DISPATCH = 46
	VIRTUAL_FUNCTION_CONVERSION = 47
	PLACEHOLDER = 48
	EXPANSION = 49
	GENERIC = 50
	TUPLE = 51
	NULLPTR = 52
	THIS = 53
	TEMPLATE_REFERENCE = 54
	STATEMENT = 55
	TYPE_TRAIT_INTRINSIC = 56
	DESIGNATED_INITIALIZER = 57
	PACKED_TEMPLATE_ARGUMENTS = 58
	TOKENS = 59
	ASSIGN_INITIALIZER = 60


class NameSort(IntEnum):
	IDENTIFIER = 0
	OPERATOR = 1
	CONVERSION = 2
	LITERAL = 3
	TEMPLATE = 4
	SPECIALIZATION = 5
	SOURCE_FILE = 6
	GUIDE = 7


class ChartSort(IntEnum):
	NONE = 0
	UNILEVEL = 1
	MULTILEVEL = 2


class AttrSort(IntEnum):
	NOTHING = 0
	BASIC = 1
	SCOPED = 2
	LABELED = 3
	CALLED = 4
	EXPANDED = 5
	FACTORED = 6
	ELABORATED = 7
	TUPLE = 8


class UnitSort(IntEnum):
	SOURCE = 0
	PRIMARY = 1
	PARTITION = 2
	HEADER = 3
	EXPORTED_TU = 4


class LiteralSort(IntEnum):
	IMMEDIATE = 0
	INTEGER = 1
	FLOATING_POINT = 2


class StringSort(IntEnum):
	ORDINARY = 0
	UTF8 = 1
	UTF16 = 2
	UTF32 = 3
	WIDE = 4


class SyntaxSort(IntEnum):
	VENDOR_EXTENSION = 0
	SIMPLE_TYPE_SPECIFIER = 1
	DECLTYPE_SPECIFIER = 2
	PLACEHOLDER_TYPE_SPECIFIER = 3
	TYPE_SPECIFIER_SEQ = 4
	DECL_SPECIFIER_SEQ = 5
	VIRTUAL_SPECIFIER_SEQ = 6
	NOEXCEPT_SPECIFICATION = 7
	EXPLICIT_SPECIFIER = 8
	ENUM_SPECIFIER = 9
	ENUMERATOR_DEFINITION = 10
	CLASS_SPECIFIER = 11
	MEMBER_SPECIFICATION = 12
	MEMBER_DECLARATION = 13
	MEMBER_DECLARATOR = 14
	ACCESS_SPECIFIER = 15
	BASE_SPECIFIER_LIST = 16
	BASE_SPECIFIER = 17
	TYPE_ID = 18
	TRAILING_RETURN_TYPE = 19
	DECLARATOR = 20
	POINTER_DECLARATOR = 21
	ARRAY_DECLARATOR = 22
	FUNCTION_DECLARATOR = 23
	ARRAY_OR_FUNCTION_DECLARATOR = 24
	PARAMETER_DECLARATOR = 25
	INIT_DECLARATOR = 26
	NEW_DECLARATOR = 27
	SIMPLE_DECLARATION = 28
	EXCEPTION_DECLARATION = 29
	CONDITION_DECLARATION = 30
	STATIC_ASSERT_DECLARATION = 31
	ALIAS_DECLARATION = 32
	CONCEPT_DEFINITION = 33
	COMPOUND_STATEMENT = 34
	RETURN_STATEMENT = 35
	IF_STATEMENT = 36
	WHILE_STATEMENT = 37
	DO_WHILE_STATEMENT = 38
	FOR_STATEMENT = 39
	INIT_STATEMENT = 40
	RANGE_BASED_FOR_STATEMENT = 41
	FOR_RANGE_DECLARATION = 42
	LABELED_STATEMENT = 43
	BREAK_STATEMENT = 44
	CONTINUE_STATEMENT = 45
	SWITCH_STATEMENT = 46
	GOTO_STATEMENT = 47
	DECLARATION_STATEMENT = 48
	EXPRESSION_STATEMENT = 49
	TRY_BLOCK = 50
	HANDLER = 51
	HANDLER_SEQ = 52
	FUNCTION_TRY_BLOCK = 53
	TYPE_ID_LIST_ELEMENT = 54
	DYNAMIC_EXCEPTION_SPEC = 55
	STATEMENT_SEQ = 56
	FUNCTION_BODY = 57
	EXPRESSION = 58
	FUNCTION_DEFINITION = 59
	MEMBER_FUNCTION_DECLARATION = 60
	TEMPLATE_DECLARATION = 61
	REQUIRES_CLAUSE = 62
	SIMPLE_REQUIREMENT = 63
	TYPE_REQUIREMENT = 64
	COMPOUND_REQUIREMENT = 65
	NESTED_REQUIREMENT = 66
	REQUIREMENT_BODY = 67
	TYPE_TEMPLATE_PARAMETER = 68
	TEMPLATE_TEMPLATE_PARAMETER = 69
	TYPE_TEMPLATE_ARGUMENT = 70
	NON_TYPE_TEMPLATE_ARGUMENT = 71
	TEMPLATE_PARAMETER_LIST = 72
	TEMPLATE_ARGUMENT_LIST = 73
	TEMPLATE_ID = 74
	MEM_INITIALIZER = 75
	CTOR_INITIALIZER = 76
	LAMBDA_INTRODUCER = 77
	LAMBDA_DECLARATOR = 78
	CAPTURE_DEFAULT = 79
	SIMPLE_CAPTURE = 80
	INIT_CAPTURE = 81
	THIS_CAPTURE = 82
	ATTRIBUTED_STATEMENT = 83
	ATTRIBUTED_DECLARATION = 84
	ATTRIBUTE_SPECIFIER_SEQ = 85
	ATTRIBUTE_SPECIFIER = 86
	ATTRIBUTE_USING_PREFIX = 87
	ATTRIBUTE = 88
	ATTRIBUTE_ARGUMENT_CLAUSE = 89
	ALIGNAS = 90
	USING_DECLARATION = 91
	USING_DECLARATOR = 92
	USING_DIRECTIVE = 93
	ARRAY_INDEX = 94
	SEH_TRY = 95
	SEH_EXCEPT = 96
	SEH_FINALLY = 97
	SEH_LEAVE = 98
	TYPE_TRAIT_INTRINSIC = 99
	TUPLE = 100
	ASM_STATEMENT = 101
	NAMESPACE_ALIAS_DEFINITION = 102
	SUPER = 103
	UNARY_FOLD_EXPRESSION = 104
	BINARY_FOLD_EXPRESSION = 105
	EMPTY_STATEMENT = 106
	STRUCTURED_BINDING_DECLARATION = 107
	STRUCTURED_BINDING_IDENTIFIER_LIST = 108
	USING_ENUM_DECLARATION = 109


class TypeBasis(IntEnum):
	VOID = 0
	BOOL = 1
	CHAR = 2
	WCHAR_T = 3
	INT = 4
	FLOAT = 5
	DOUBLE = 6
	NULLPTR = 7
	ELLIPSIS = 8
	SEGMENT_TYPE = 9
	CLASS = 10
	STRUCT = 11
	UNION = 12
	ENUM = 13
	TYPENAME = 14
	NAMESPACE = 15
	INTERFACE = 16
	FUNCTION = 17
	EMPTY = 18
	VARIABLE_TEMPLATE = 19
	CONCEPT = 20
	AUTO = 21
	DECLTYPE_AUTO = 22
	OVERLOAD = 23


class Access(IntEnum):
	NONE = 0
	PRIVATE = 1
	PROTECTED = 2
	PUBLIC = 3


class BasicSpecifiers(IntFlag):
	CXX = 0
	C = 1 << 0
	INTERNAL = 1 << 1
	VAGUE = 1 << 2
	EXTERNAL = 1 << 3
	DEPRECATED = 1 << 4
	INITIALIZED_IN_CLASS = 1 << 5
	NON_EXPORTED = 1 << 6
	IS_MEMBER_OF_GLOBAL_MODULE = 1 << 7


class Qualifier(IntFlag):
	NONE = 0
	CONST = 1 << 0
	VOLATILE = 1 << 1
	RESTRICT = 1 << 2


class _PlainIndex(int):
	"""A bare 32-bit position; subclasses are distinct nominal kinds."""

	__slots__ = ()

	SIZE: ClassVar[int] = _U32.size

	@property
	def is_null(self) -> bool:
		return self == 0

	@property
	def raw(self) -> int:
		return int(self)

	@classmethod
	def from_raw(cls, raw: int) -> Any:
		return cls(raw)

	@classmethod
	def unpack_from(cls, buffer: Any, offset: int = 0) -> Any:
		return cls(_U32.unpack_from(buffer, offset)[0])

	@classmethod
	def position(cls, key: Any) -> int:
		return int(key)

	def __repr__(self) -> str:
		return f"{type(self).__name__}({int(self)})"


class Index(_PlainIndex):
	"""0-based position into a partition."""

	__slots__ = ()


class ScopeIndex(_PlainIndex):
	"""1-based position into `scope.desc`; 0 is the null scope."""

	__slots__ = ()

	@classmethod
	def position(cls, key: Any) -> int:
		if key == 0:
			raise IndexError("null scope index does not designate a scope")
		return int(key) - 1


class TextOffset(_PlainIndex):
	"""Byte offset into the string table; 0 is the null text."""

	__slots__ = ()


@dataclass(frozen=True)
class AbstractIndex:
	"""A (sort, position) pair packed into 32 bits."""

	SORT_TYPE: ClassVar[Type[IntEnum]]
	SORT_BITS: ClassVar[int]
	SIZE: ClassVar[int] = _U32.size

	sort: IntEnum | int
	index: int

	@classmethod
	def from_raw(cls, raw: int) -> Any:
		mask = (1 << cls.SORT_BITS) - 1
		return cls(coerce_enum(cls.SORT_TYPE, raw & mask), raw >> cls.SORT_BITS)

	@classmethod
	def unpack_from(cls, buffer: Any, offset: int = 0) -> Any:
		return cls.from_raw(_U32.unpack_from(buffer, offset)[0])

	@classmethod
	def null(cls) -> Any:
		return cls.from_raw(0)

	@classmethod
	def position(cls, key: Any) -> int:
		return key.index

	@property
	def raw(self) -> int:
		return (self.index << self.SORT_BITS) | int(self.sort)

	@property
	def is_null(self) -> bool:
		return self.raw == 0

	def __post_init__(self) -> None:
		if not 0 <= int(self.sort) < (1 << self.SORT_BITS):
			raise ValueError(f"{type(self).__name__} sort {int(self.sort)} does not fit in {self.SORT_BITS} bits")
		if not 0 <= self.index < (1 << (32 - self.SORT_BITS)):
			raise ValueError(f"{type(self).__name__} position {self.index} does not fit in {32 - self.SORT_BITS} bits")

	def __repr__(self) -> str:
		sort = self.sort.name if isinstance(self.sort, IntEnum) else str(self.sort)
		return f"{type(self).__name__}({sort}, {self.index})"


@dataclass(frozen=True, repr=False)
class DeclIndex(AbstractIndex):
	SORT_TYPE: ClassVar[Type[IntEnum]] = DeclSort
	SORT_BITS: ClassVar[int] = 5


@dataclass(frozen=True, repr=False)
class TypeIndex(AbstractIndex):
	SORT_TYPE: ClassVar[Type[IntEnum]] = TypeSort
	SORT_BITS: ClassVar[int] = 5


@dataclass(frozen=True, repr=False)
class ExprIndex(AbstractIndex):
	SORT_TYPE: ClassVar[Type[IntEnum]] = ExprSort
	SORT_BITS: ClassVar[int] = 6


@dataclass(frozen=True, repr=False)
class NameIndex(AbstractIndex):
	SORT_TYPE: ClassVar[Type[IntEnum]] = NameSort
	SORT_BITS: ClassVar[int] = 3


@dataclass(frozen=True, repr=False)
class ChartIndex(AbstractIndex):
	SORT_TYPE: ClassVar[Type[IntEnum]] = ChartSort
	SORT_BITS: ClassVar[int] = 2


@dataclass(frozen=True, repr=False)
class SyntaxIndex(AbstractIndex):
	SORT_TYPE: ClassVar[Type[IntEnum]] = SyntaxSort
	SORT_BITS: ClassVar[int] = 7


@dataclass(frozen=True, repr=False)
class AttrIndex(AbstractIndex):
	SORT_TYPE: ClassVar[Type[IntEnum]] = AttrSort
	SORT_BITS: ClassVar[int] = 4


@dataclass(frozen=True, repr=False)
class UnitIndex(AbstractIndex):
	SORT_TYPE: ClassVar[Type[IntEnum]] = UnitSort
	SORT_BITS: ClassVar[int] = 3


@dataclass(frozen=True, repr=False)
class LitIndex(AbstractIndex):
	SORT_TYPE: ClassVar[Type[IntEnum]] = LiteralSort
	SORT_BITS: ClassVar[int] = 2


@dataclass(frozen=True, repr=False)
class StringIndex(AbstractIndex):
	SORT_TYPE: ClassVar[Type[IntEnum]] = StringSort
	SORT_BITS: ClassVar[int] = 3


@dataclass(frozen=True)
class Sequence:
	"""A (start, cardinality) range into a partition or heap."""

	SIZE: ClassVar[int] = _SEQUENCE.size

	start: int = 0
	cardinality: int = 0

	@classmethod
	def unpack_from(cls, buffer: Any, offset: int = 0) -> "Sequence":
		start, cardinality = _SEQUENCE.unpack_from(buffer, offset)
		return cls(start, cardinality)

	@property
	def is_empty(self) -> bool:
		return self.cardinality == 0

	def __len__(self) -> int:
		return self.cardinality


@dataclass(frozen=True)
class SourceLocation:
	line: int = 0
	column: int = 0


@dataclass(frozen=True)
class ModuleReference:
	"""Owning unit and partition names of an imported declaration."""

	owner: TextOffset = TextOffset(0)
	partition: TextOffset = TextOffset(0)


__all__ = [
	"coerce_enum",
	"DeclSort",
	"TypeSort",
	"ExprSort",
	"NameSort",
	"ChartSort",
	"AttrSort",
	"UnitSort",
	"LiteralSort",
	"StringSort",
	"SyntaxSort",
	"TypeBasis",
	"Access",
	"BasicSpecifiers",
	"Qualifier",
	"Index",
	"ScopeIndex",
	"TextOffset",
	"AbstractIndex",
	"DeclIndex",
	"TypeIndex",
	"ExprIndex",
	"NameIndex",
	"ChartIndex",
	"SyntaxIndex",
	"AttrIndex",
	"UnitIndex",
	"LitIndex",
	"StringIndex",
	"Sequence",
	"SourceLocation",
	"ModuleReference",
]
