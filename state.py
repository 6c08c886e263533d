"""Session-wide defaults, read by the shell and by Polynomial.parse."""

# Ordered variable names; index 0 is the most significant variable under lex.
# Listed in reverse so that printed terms look like z*y*x.
ringvar = ['z', 'y', 'x']

# Default term order name, see ordering.get_order
order = 'lex'

# Weight matrix for the 'matrix' order (one row per weight vector).
# Empty means no matrix order is configured.
M = []

verbose = False
