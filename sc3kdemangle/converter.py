import contextlib
import os
import pathlib
import shutil
import tempfile

from . import declaration
from . import demangler
from . import prefixes as line_prefixes
from .substitution import substitute_types

def demangled_signatures(lines, prefixes = line_prefixes.LinePrefix.ALL,
		style = demangler.DemangleStyle.AUTO, demangle_fn = None):
	"""
	Yields the substituted signature for every non-blank line.
	"""
	if demangle_fn is None:
		demangle_fn = demangler.demangle
	for line in lines:
		symbol = line_prefixes.normalize_line(line.rstrip('\r\n'), prefixes)
		if symbol is None:
			continue
		yield substitute_types(demangle_fn(symbol, style))

def convert_lines(lines, prefixes = line_prefixes.LinePrefix.ALL,
		style = demangler.DemangleStyle.AUTO, demangle_fn = None):
	''' yields the declaration lines (without line endings) for the given symbol dump '''
	signatures = demangled_signatures(lines, prefixes, style, demangle_fn)
	return declaration.reconstruct(signatures)

def is_same_file(first, second):
	first, second = pathlib.Path(first), pathlib.Path(second)
	if first.exists() and second.exists():
		return first.samefile(second)
	return first.resolve() == second.resolve()

@contextlib.contextmanager
def staged_output(destination):
	"""
	Yields a writable temporary file that is copied onto destination only if the block
	completes; the temporary file is removed either way.
	"""
	fd, temp_path = tempfile.mkstemp(suffix = '.txt', text = True)
	try:
		with open(fd, 'wt', encoding = 'utf-8', newline = '\n') as f:
			yield f
		shutil.copyfile(temp_path, destination)
	finally:
		with contextlib.suppress(FileNotFoundError):
			os.remove(temp_path)

def convert_file(input_path, output_path = None, prefixes = line_prefixes.LinePrefix.ALL,
		style = demangler.DemangleStyle.AUTO, demangle_fn = None):
	"""
	Converts the symbol dump at input_path. When output_path is omitted or names the input
	file, the input file is overwritten with the result.
	"""
	if output_path is None or is_same_file(input_path, output_path):
		output_path = input_path

	# the input is closed before the staged output is copied over it
	with staged_output(output_path) as out:
		with open(input_path, 'rt', encoding = 'utf-8') as f:
			for line in convert_lines(f, prefixes, style, demangle_fn):
				print(line, file = out)
	return pathlib.Path(output_path)
