from setalgebra import Set

# === Construction ===
s = Set()
assert len(s) == 0, 'empty set len'
assert s.count == 0, 'empty set count'
assert s == Set(), 'empty set equality'

s = Set([1, 2, 3])
assert s.count == 3, 'set from list count'

s = Set([1, 1, 2, 2, 3])
assert s.count == 3, 'set from list deduplication'
assert list(s) == [1, 2, 3], 'set from list keeps first occurrences'

# === Add ===
s = Set()
s.add(1)
s.add(2)
s.add(1)  # duplicate
assert s.count == 2, 'add with duplicate'
assert list(s) == [1, 2], 'add keeps insertion order'

# === Remove ===
s = Set([1, 2, 3])
s.remove(2)
assert s.count == 2, 'remove existing'
assert list(s) == [1, 3], 'remove keeps remaining order'

# === Add then remove ===
s = Set([1, 2, 3])
s.add(10)
s.remove(10)
assert s.count == 3, 'add/remove round trip count'
assert 10 not in s, 'add/remove round trip membership'

# === Contains ===
s = Set(['a', 'b'])
assert 'a' in s, 'contains true'
assert 'z' not in s, 'contains false'
assert None not in s, 'None is never a member'

# === Iteration is restartable ===
s = Set([3, 1, 2])
assert list(s) == [3, 1, 2], 'first iteration'
assert list(s) == [3, 1, 2], 'second iteration'
s.add(0)
assert list(s) == [3, 1, 2, 0], 'iteration sees later additions'

# === Equality ignores order ===
assert Set([1, 2, 3]) == Set([3, 2, 1]), 'equality ignores order'
assert Set([1, 2]) != Set([1, 2, 3]), 'different count'
assert Set([1, 2]) != Set([1, 3]), 'different elements'
assert Set([1]) != {1}, 'not equal to builtin set'

# === Bool ===
assert bool(Set()) == False, 'empty set is falsy'
assert bool(Set([1])) == True, 'non-empty set is truthy'

# === repr ===
assert repr(Set()) == 'Set()', 'empty set repr'
assert repr(Set([1, 2, 3])) == 'Set({1, 2, 3})', 'set repr'
assert str(Set(['x'])) == "{'x'}", 'set str'
