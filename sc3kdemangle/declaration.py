import dataclasses
import enum
from typing import Optional

CLASS_SEPARATOR = '::'

# implementers of cIGZUnknown list QueryInterface, AddRef and Release before anything else
GZ_UNKNOWN_CLASS = 'cIGZUnknown'
GZ_UNKNOWN_QUERY_INTERFACE = 'QueryInterface(uint32_t, void**)'

METHOD_FORMAT = '    virtual void* {} = 0;'

class State(enum.Enum):
	AWAITING_FIRST_LINE = enum.auto()
	SKIPPING_ADD_REF = enum.auto()
	SKIPPING_RELEASE = enum.auto()
	INTERFACE_BODY = enum.auto()
	PLAIN_BODY = enum.auto()

# state after a line has been handled; the first line is resolved by ClassContext
TRANSITIONS = {
	State.SKIPPING_ADD_REF: State.SKIPPING_RELEASE,
	State.SKIPPING_RELEASE: State.INTERFACE_BODY,
	State.INTERFACE_BODY: State.INTERFACE_BODY,
	State.PLAIN_BODY: State.PLAIN_BODY,
}

SUPPRESSING_STATES = frozenset({ State.SKIPPING_ADD_REF, State.SKIPPING_RELEASE })

def interface_name(class_name):
	"""
	Returns the interface form of a class name: cSC3App becomes cISC3App, and the cRZ prefix
	becomes cIGZ (cRZLanguageManager becomes cIGZLanguageManager).
	"""
	if class_name.startswith('cRZ'):
		return 'cIGZ' + class_name[3:]
	if class_name.startswith('c'):
		return 'cI' + class_name[1:]
	return class_name

@dataclasses.dataclass(frozen = True)
class ClassContext:
	class_name: Optional[str] = None
	name_offset: int = 0
	is_interface: bool = False

	@classmethod
	def from_signature(cls, signature):
		separator = signature.find(CLASS_SEPARATOR)
		if separator == -1:
			return cls()

		name_offset = separator + len(CLASS_SEPARATOR)
		return cls(
			class_name = signature[:separator],
			name_offset = name_offset,
			is_interface = signature[name_offset:] == GZ_UNKNOWN_QUERY_INTERFACE,
		)

	@property
	def declared_name(self):
		if self.is_interface:
			return interface_name(self.class_name)
		return self.class_name

	def header(self):
		if self.class_name is None:
			return []
		if self.is_interface:
			return [
				f'#include "{GZ_UNKNOWN_CLASS}.h"',
				'',
				f'class {self.declared_name} : public {GZ_UNKNOWN_CLASS}',
				'{',
				'public:',
			]
		return [ f'class {self.declared_name}', '{', 'public:' ]

class DeclarationReconstructor:
	"""
	Builds a class declaration out of substituted signatures, fed one at a time.
	"""

	def __init__(self):
		self.state = State.AWAITING_FIRST_LINE
		self.context = None
		self.finished = False

	def feed(self, signature):
		''' returns the output lines for the given signature '''
		if self.state is State.AWAITING_FIRST_LINE:
			self.context = ClassContext.from_signature(signature)
			output = self.context.header()
			if self.context.is_interface:
				# QueryInterface itself isn't written
				self.state = State.SKIPPING_ADD_REF
				return output
			self.state = State.PLAIN_BODY
			return output + [ self.format_method(signature) ]

		suppressed = self.state in SUPPRESSING_STATES
		self.state = TRANSITIONS[self.state]
		if suppressed:
			return []
		return [ self.format_method(signature) ]

	def format_method(self, signature):
		return METHOD_FORMAT.format(signature[self.context.name_offset:])

	def finish(self):
		if self.finished:
			return []
		self.finished = True
		return [ '};' ]

def reconstruct(signatures):
	''' yields the lines of the declaration for an iterable of substituted signatures '''
	reconstructor = DeclarationReconstructor()
	for signature in signatures:
		yield from reconstructor.feed(signature)
	yield from reconstructor.finish()
