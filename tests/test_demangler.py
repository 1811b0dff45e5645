import sys

import pytest

from sc3kdemangle import demangler
from sc3kdemangle.demangler import DemangleStyle, demangle, detect_style
from sc3kdemangle.errors import DemangleError
from sc3kdemangle.substitution import substitute_types

def test_detect_style():
	assert detect_style('_ZN7cSC3App6AddRefEv') is DemangleStyle.ITANIUM
	assert detect_style('AddRef__7cSC3App') is DemangleStyle.GNU_V2

def test_itanium_symbol():
	assert demangle('_Z3fooi') == 'foo(int)'
	assert demangle('_ZN7cSC3App14QueryInterfaceEmPPv') == 'cSC3App::QueryInterface(unsigned long, void**)'

def test_itanium_query_interface_is_recognised_after_substitution():
	demangled = demangle('_ZN7cSC3App14QueryInterfaceEmPPv', DemangleStyle.ITANIUM)
	assert substitute_types(demangled) == 'cSC3App::QueryInterface(uint32_t, void**)'

def test_failure_raises(monkeypatch):
	monkeypatch.setattr(demangler.pydemangler, 'demangle', lambda symbol: None)
	with pytest.raises(DemangleError) as e:
		demangle('_Znot_a_symbol')
	assert e.value.symbol == '_Znot_a_symbol'

def test_explicit_style_overrides_detection(monkeypatch):
	calls = []
	def fake_itanium(symbol):
		calls.append(symbol)
		return 'Foo::bar(void)'
	monkeypatch.setitem(demangler._backends, DemangleStyle.ITANIUM, fake_itanium)
	assert demangle('bar__3Foo', DemangleStyle.ITANIUM) == 'Foo::bar(void)'
	assert calls == [ 'bar__3Foo' ]

def test_results_are_cached(monkeypatch):
	calls = []
	def fake_itanium(symbol):
		calls.append(symbol)
		return 'foo(int)'
	monkeypatch.setitem(demangler._backends, DemangleStyle.ITANIUM, fake_itanium)
	demangle('_Z3fooi')
	demangle('_Z3fooi')
	assert calls == [ '_Z3fooi' ]

def test_gnu_v2_symbol():
	pytest.importorskip('gnu2_demangler')
	demangled = substitute_types(demangle('QueryInterface__7cSC3AppUlPPv'))
	assert demangled == 'cSC3App::QueryInterface(uint32_t, void**)'

def test_gnu_v2_const_pointer():
	pytest.importorskip('gnu2_demangler')
	demangled = substitute_types(demangle('SetName__7cSC3AppPCc'))
	assert demangled == 'cSC3App::SetName(const int8_t*)'

def test_gnu_v2_without_extra_raises(monkeypatch):
	monkeypatch.setitem(sys.modules, 'gnu2_demangler', None)
	with pytest.raises(DemangleError, match = 'gnu2'):
		demangle('AddRef__7cSC3App')
