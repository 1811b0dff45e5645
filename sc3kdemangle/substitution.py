"""
Rewrites the primitive types in a demangled signature to their fixed-width names.
"""

# order matters: unsigned types before signed ones, and 'long long' before 'long'
PARAMETER_SUBSTITUTIONS = (
	# the demangler puts a space in front of pointer and reference modifiers
	(' &', '&'),
	(' *', '*'),
	(' **', '**'),
	
	('unsigned char', 'uint8_t'),
	('unsigned short', 'uint16_t'),
	('unsigned int', 'uint32_t'),
	('unsigned long long', 'uint64_t'),
	('unsigned long', 'uint32_t'),
	
	('char', 'int8_t'),
	('short', 'int16_t'),
	('int', 'int32_t'),
	('long long', 'int64_t'),
	('long', 'int32_t'),
)

_PRECEDING_BOUNDARY = ' ('
# pointer and reference modifiers also end a type name once their leading space is gone
_FOLLOWING_BOUNDARY = ',) *&'

def is_whole_word(text, start, token):
	''' checks that the match of token at start isn't part of a wider name '''
	if start == 0:
		return False
	end = start + len(token)
	preceded = text[start - 1] in _PRECEDING_BOUNDARY or token.startswith(' ')
	followed = end == len(text) or text[end] in _FOLLOWING_BOUNDARY
	return preceded and followed

def replace_whole_word(text, token, replacement):
	"""
	Replaces every whole-word occurrence of token, so 'int' inside 'uint32_t' is left alone.
	"""
	start = text.find(token)
	while start != -1:
		if is_whole_word(text, start, token):
			text = text[:start] + replacement + text[start + len(token):]
			start = text.find(token, start + len(replacement))
		else:
			start = text.find(token, start + 1)
	return text

def substitute_types(signature, rules = PARAMETER_SUBSTITUTIONS):
	for token, replacement in rules:
		signature = replace_whole_word(signature, token, replacement)
	return signature
