#!/usr/bin/python3

import argparse
import sys

from . import converter
from .demangler import DemangleStyle
from .errors import Sc3kDemangleError
from .prefixes import LinePrefix

class UsageParser(argparse.ArgumentParser):
	def error(self, message):
		self.print_usage(sys.stdout)
		print(f'{self.prog}: error: {message}')
		print(self.epilog)
		self.exit(1)

def build_parser():
	parser = UsageParser(
		prog = 'sc3k-demangle',
		description = "Converts the mangled debug symbols of a class into a C++ interface declaration.",
		epilog = "The output file is optional, when it is omitted the input file will be overwritten.",
	)

	parser.add_argument('input_file', help = "Text file with one mangled symbol per line")
	parser.add_argument('output_file', nargs = '?', default = None)
	parser.add_argument(
		'--style', choices = [ s.value for s in DemangleStyle ], default = DemangleStyle.AUTO.value,
		help = "Mangling scheme of the symbols (default: %(default)s)"
	)
	parser.add_argument(
		'--no-thunk', dest = 'thunk', action = 'store_false',
		help = "Don't strip __thunk_<n>_ prefixes"
	)
	parser.add_argument(
		'--no-virtual', dest = 'virtual', action = 'store_false',
		help = "Don't treat 'virtual <type> <name>(...)' lines as prototypes"
	)
	return parser

def main(argv = None):
	args = build_parser().parse_args(argv)

	prefixes = LinePrefix.NONE
	if args.thunk:
		prefixes |= LinePrefix.THUNK
	if args.virtual:
		prefixes |= LinePrefix.VIRTUAL

	try:
		converter.convert_file(
			args.input_file, args.output_file,
			prefixes = prefixes, style = DemangleStyle(args.style)
		)
	except (Sc3kDemangleError, OSError, UnicodeDecodeError) as e:
		print(e)
		return 1
	return 0

if __name__ == "__main__":
	sys.exit(main())
