import pytest

from sc3kdemangle import demangler
from sc3kdemangle.errors import DemangleError

# what the demangler produces for the symbols used throughout the tests
DEMANGLED = {
	'QueryInterface__7cSC3AppUlPPv': 'cSC3App::QueryInterface(unsigned long, void **)',
	'AddRef__7cSC3App': 'cSC3App::AddRef(void)',
	'Release__7cSC3App': 'cSC3App::Release(void)',
	'GetGameDirectory__7cSC3AppR8cRZString': 'cSC3App::GetGameDirectory(cRZString &)',
	'SetFlag__7cSC3AppUib': 'cSC3App::SetFlag(unsigned int, bool)',
	'QueryInterface__18cRZLanguageManagerUlPPv': 'cRZLanguageManager::QueryInterface(unsigned long, void **)',
	'AddRef__18cRZLanguageManager': 'cRZLanguageManager::AddRef(void)',
	'Release__18cRZLanguageManager': 'cRZLanguageManager::Release(void)',
	'GetLanguage__C18cRZLanguageManager': 'cRZLanguageManager::GetLanguage(void) const',
	'bar__3Fooi': 'Foo::bar(int)',
	'baz__3FooPCcs': 'Foo::baz(const char *, short)',
	'_Z3fooi': 'foo(int)',
	'_Z3barPv': 'bar(void*)',
}

def fake_demangle(symbol, style = None):
	try:
		return DEMANGLED[symbol]
	except KeyError:
		raise DemangleError(symbol) from None

@pytest.fixture
def demangle_fn():
	return fake_demangle

@pytest.fixture(autouse = True)
def clear_demangle_cache():
	demangler.demangle.cache_clear()
	yield
	demangler.demangle.cache_clear()
