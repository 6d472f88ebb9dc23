from setalgebra import Set

a = Set([1, 2, 3, 4, 5, 6])
b = Set([4, 5, 6, 7, 8, 9])
c = Set([2, 3, 4])
empty = Set()

# === Union ===
u = Set.union(a, b)
assert u.count == 9, 'union count'
assert list(u) == [1, 2, 3, 4, 5, 6, 7, 8, 9], 'union order'
assert Set.union(a, b) == Set.union(b, a), 'union is commutative'
assert Set.union(a, a) == a, 'union is idempotent'
assert Set.union(a, empty) == a, 'union with empty'

# === Intersection ===
i = Set.intersection(a, b)
assert list(i) == [4, 5, 6], 'intersection'
assert Set.intersection(a, empty) == empty, 'intersection with empty'
assert Set.subset(i, a), 'intersection is a subset of a'
assert Set.subset(i, b), 'intersection is a subset of b'

# === Difference (symmetric) ===
d = Set.difference(a, b)
assert d.count == 6, 'difference count'
assert list(d) == [1, 2, 3, 7, 8, 9], 'difference order'
assert Set.difference(a, a) == empty, 'difference with itself'
assert Set.difference(a, empty) == a, 'difference with empty'

# === Subset ===
assert Set.subset(c, a) == True, 'subset true'
assert Set.subset(c, b) == False, 'subset false'
assert Set.subset(a, a) == True, 'subset is reflexive'
assert Set.subset(empty, a) == True, 'empty is a subset'
assert Set.subset(empty, empty) == True, 'empty is a subset of empty'

# === Operators ===
assert a | b == u, 'or is union'
assert a & b == i, 'and is intersection'
assert a ^ b == d, 'xor is difference'
assert c <= a, 'le is subset'
assert not (c <= b), 'le is subset false'
