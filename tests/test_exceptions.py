import pytest
from inline_snapshot import snapshot

import setalgebra
from setalgebra import Set

# === InvalidArgumentError ===


def test_add_none():
    s = Set([1])
    with pytest.raises(setalgebra.InvalidArgumentError) as exc_info:
        s.add(None)
    assert isinstance(exc_info.value, setalgebra.SetAlgebraError)
    assert isinstance(exc_info.value, ValueError)
    assert str(exc_info.value) == snapshot('item must not be None')
    assert list(s) == [1]


def test_remove_none():
    s = Set([1])
    with pytest.raises(setalgebra.InvalidArgumentError) as exc_info:
        s.remove(None)
    assert str(exc_info.value) == snapshot('item must not be None')
    assert list(s) == [1]


def test_construct_with_none():
    with pytest.raises(setalgebra.InvalidArgumentError):
        Set([1, None, 2])


@pytest.mark.parametrize('operation', [Set.union, Set.intersection, Set.difference, Set.subset], ids=lambda f: f.__name__)
def test_operation_first_operand_none(operation):
    with pytest.raises(setalgebra.InvalidArgumentError) as exc_info:
        operation(None, Set([1]))
    assert str(exc_info.value) == snapshot('a must not be None')


@pytest.mark.parametrize('operation', [Set.union, Set.intersection, Set.difference, Set.subset], ids=lambda f: f.__name__)
def test_operation_second_operand_none(operation):
    with pytest.raises(setalgebra.InvalidArgumentError) as exc_info:
        operation(Set([1]), None)
    assert str(exc_info.value) == snapshot('b must not be None')


def test_operation_both_none_reports_first():
    with pytest.raises(setalgebra.InvalidArgumentError) as exc_info:
        Set.union(None, None)
    assert str(exc_info.value) == snapshot('a must not be None')


# === NotFoundError ===


def test_remove_missing():
    s = Set([1, 2, 3])
    with pytest.raises(setalgebra.NotFoundError) as exc_info:
        s.remove(7)
    assert isinstance(exc_info.value, setalgebra.SetAlgebraError)
    assert exc_info.value.item == 7
    assert str(exc_info.value) == snapshot('7')
    assert list(s) == [1, 2, 3]


def test_remove_missing_is_key_error():
    s = Set(['a'])
    with pytest.raises(KeyError) as exc_info:
        s.remove('b')
    assert repr(exc_info.value) == snapshot("NotFoundError('b')")


def test_remove_twice():
    s = Set(['a'])
    s.remove('a')
    with pytest.raises(setalgebra.NotFoundError):
        s.remove('a')
    assert s.count == 0
