from setalgebra import Set

# === Operands are not modified ===
a = Set([1, 2, 3])
b = Set([3, 4])
Set.union(a, b)
Set.intersection(a, b)
Set.difference(a, b)
Set.subset(a, b)
assert list(a) == [1, 2, 3], 'first operand untouched'
assert list(b) == [3, 4], 'second operand untouched'

# === Results are independent ===
u = Set.union(a, b)
u.add(99)
assert 99 not in a, 'union result does not alias a'
assert 99 not in b, 'union result does not alias b'

# === Intersection follows the smaller set ===
big = Set([1, 2, 3, 4])
small = Set([4, 3])
assert list(Set.intersection(big, small)) == [4, 3], 'smaller second set drives'
assert list(Set.intersection(small, big)) == [4, 3], 'smaller first set drives'

# tie iterates the second set
x = Set([1, 2])
y = Set([2, 1])
assert list(Set.intersection(x, y)) == [2, 1], 'tie iterates the second set'

# === Unhashable elements ===
s = Set([[1], [2], [1]])
assert s.count == 2, 'lists compare by equality'
s.remove([2])
assert list(s) == [[1]], 'remove by equality'
assert Set.union(Set([{'k': 1}]), Set([{'k': 1}, {'k': 2}])).count == 2, 'union of dicts'
