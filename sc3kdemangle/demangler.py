import enum
import functools

import pydemangler

from .errors import DemangleError

class DemangleStyle(enum.Enum):
	AUTO = 'auto'
	ITANIUM = 'itanium'
	GNU_V2 = 'gnu-v2'

def _demangle_itanium(symbol):
	return pydemangler.demangle(symbol)

def _demangle_gnu_v2(symbol):
	# gcc 2.95 symbols, as shipped in the SimCity 3000 Unlimited Linux release
	try:
		import gnu2_demangler
	except ImportError:
		raise DemangleError(symbol, "GNU v2 symbols need the 'gnu2' extra (gnu2-demangler).") from None
	
	try:
		return str(gnu2_demangler.parse(symbol))
	except (ValueError, AssertionError, IndexError) as e:
		raise DemangleError(symbol, str(e) or None) from e

_backends = {
	DemangleStyle.ITANIUM: _demangle_itanium,
	DemangleStyle.GNU_V2: _demangle_gnu_v2,
}

def detect_style(symbol):
	return DemangleStyle.ITANIUM if symbol.startswith('_Z') else DemangleStyle.GNU_V2

@functools.lru_cache(maxsize = None)
def demangle(symbol, style = DemangleStyle.AUTO):
	"""
	Demangles a symbol with its parameter types, raising DemangleError if the backend can't
	make sense of it.
	"""
	if style is DemangleStyle.AUTO:
		style = detect_style(symbol)
	
	demangled = _backends[style](symbol)
	if not demangled:
		raise DemangleError(symbol)
	return str(demangled)
