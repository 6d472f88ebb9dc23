# Test that a missing operand is rejected
from setalgebra import Set

Set.union(Set([1]), None)
# Raise=InvalidArgumentError('b must not be None')
