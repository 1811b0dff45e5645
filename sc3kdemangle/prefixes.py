import enum

from .errors import PrefixError

THUNK_PREFIX = '__thunk_'
VIRTUAL_PROTOTYPE_PREFIX = 'virtual '

class LinePrefix(enum.Flag):
	''' structural line decorations that are stripped before demangling '''
	NONE = 0
	THUNK = enum.auto()
	VIRTUAL = enum.auto()
	ALL = THUNK | VIRTUAL

def strip_thunk_prefix(line):
	"""
	Thunks are written as __thunk_<unique number>_<mangled name>; returns the mangled name.
	"""
	prefix_end = line.find('_', len(THUNK_PREFIX) + 1)
	if prefix_end == -1:
		raise PrefixError("Failed to find the end of the thunk prefix.", line)
	return line[prefix_end + 1:]

def strip_virtual_prototype(line):
	"""
	Virtual function prototypes are written as virtual <return type> <mangled name>(<parameters>);
	returns the mangled name.
	"""
	return_type_end = line.find(' ', len(VIRTUAL_PROTOTYPE_PREFIX) + 1)
	if return_type_end == -1:
		raise PrefixError("Failed to find the end of the virtual function return type.", line)
	
	mangled_name_start = return_type_end + 1
	mangled_name_end = line.find('(', mangled_name_start)
	if mangled_name_end == -1:
		raise PrefixError("Failed to find the end of the virtual function prototype prefix.", line)
	return line[mangled_name_start:mangled_name_end]

def normalize_line(line, prefixes = LinePrefix.ALL):
	"""
	Returns the bare mangled name on the given line, or None if the line should be skipped.
	"""
	if not line:
		return None
	if LinePrefix.THUNK in prefixes and line.startswith(THUNK_PREFIX):
		return strip_thunk_prefix(line)
	if LinePrefix.VIRTUAL in prefixes and line.startswith(VIRTUAL_PROTOTYPE_PREFIX):
		return strip_virtual_prototype(line)
	return line
