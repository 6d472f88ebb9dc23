# Test that removing an element that is not in the set raises NotFoundError
from setalgebra import Set

s = Set([1, 2, 3])
s.remove(7)
# Raise=NotFoundError(7)
