import pytest
from inline_snapshot import snapshot

from setalgebra import demo


def test_default_sets(capsys: pytest.CaptureFixture[str]):
    assert demo.main([]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == snapshot(
        [
            'First set: 1 2 3 4 5 6 ',
            'Second set: 4 5 6 7 8 9 ',
            'Third set: 2 3 4 ',
            'Union of the first and second sets: 1 2 3 4 5 6 7 8 9 ',
            'Difference of the first and second sets: 1 2 3 7 8 9 ',
            'Intersection of the first and second sets: 4 5 6 ',
            'The third set is a subset of the first.',
            'The third set is not a subset of the second.',
        ]
    )


def test_custom_sets(capsys: pytest.CaptureFixture[str]):
    assert demo.main(['--first', '1', '2', '2', '--second', '2', '3', '--third', '2']) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == snapshot(
        [
            'First set: 1 2 ',
            'Second set: 2 3 ',
            'Third set: 2 ',
            'Union of the first and second sets: 1 2 3 ',
            'Difference of the first and second sets: 1 3 ',
            'Intersection of the first and second sets: 2 ',
            'The third set is a subset of the first.',
            'The third set is a subset of the second.',
        ]
    )


def test_empty_third_set(capsys: pytest.CaptureFixture[str]):
    demo.main(['--third'])
    lines = capsys.readouterr().out.splitlines()
    assert lines[2] == 'Third set: '
    assert lines[-2:] == snapshot(
        [
            'The third set is a subset of the first.',
            'The third set is a subset of the second.',
        ]
    )


def test_bad_argument(capsys: pytest.CaptureFixture[str]):
    with pytest.raises(SystemExit) as exc_info:
        demo.main(['--first', 'one'])
    assert exc_info.value.code == 2
    assert "invalid int value: 'one'" in capsys.readouterr().err
