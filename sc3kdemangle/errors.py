class Sc3kDemangleError(Exception):
	''' base class for every failure that aborts a conversion '''

class PrefixError(Sc3kDemangleError, ValueError):
	def __init__(self, message, line):
		super().__init__(f'{message} Line: {line!r}')
		self.line = line

class DemangleError(Sc3kDemangleError):
	def __init__(self, symbol, reason = None):
		message = f'Failed to demangle {symbol!r}.'
		if reason:
			message += f' {reason}'
		super().__init__(message)
		self.symbol = symbol
