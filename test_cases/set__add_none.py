# Test that None is rejected as an element
from setalgebra import Set

s = Set()
s.add(None)
# Raise=InvalidArgumentError('item must not be None')
