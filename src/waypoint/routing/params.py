"""Shared routing constants.

The reserved title key and the placeholder kinds used by ``Argument``.
"""

# Path-segment key for destinations declared with ``dynamic_title=True``.
# Never accepted as a positional or query parameter name.
TITLE_KEY = "appTitle"

# Argument kinds, in the order they appear in a route pattern
TITLE = "title"
POSITIONAL = "positional"
QUERY = "query"

# Characters that end the destination name at the head of a path
NAME_TERMINATORS = ("/", "?")

# Characters a parameter name may not contain: path and query separators
# plus the placeholder braces
PARAM_FORBIDDEN = ("/", "?", "&", "=", "{", "}")
