import logging
import pytest
from resumable import sfilter, sfilterfalse, takewhile, dropwhile, \
    compress, count, iterate, EvaluationError
from resumable.filtering import ifilter, ifilterfalse


def test_sfilter():
    assert list(sfilter(lambda x: x > 5, range(1, 11))) == [6, 7, 8, 9, 10]
    assert list(sfilterfalse(lambda x: x > 5, range(1, 11))) \
        == [1, 2, 3, 4, 5]
    assert list(sfilter(lambda x: x % 3, range(10))) == [1, 2, 4, 5, 7, 8]
    assert list(sfilter(bool, [])) == []

    evens = sfilter(lambda x: x % 2 == 0, count())
    assert [next(evens) for _ in range(4)] == [0, 2, 4, 6]

    with pytest.raises(TypeError):
        sfilter(None, [1, 2])


def test_takewhile():
    assert list(takewhile(lambda x: x < 5, [1, 4, 6, 4, 1])) == [1, 4]
    assert list(takewhile(lambda x: x < 5, [])) == []

    source = iterate([1, 4, 6, 7, 8])
    assert list(takewhile(lambda x: x < 5, source)) == [1, 4]
    assert list(source) == [7, 8]


@pytest.mark.timeout(3)
def test_takewhile_infinite():
    assert list(takewhile(lambda x: x < 5, count())) == [0, 1, 2, 3, 4]


def test_dropwhile():
    calls = []

    def small(x):
        calls.append(x)
        return x < 5

    assert list(dropwhile(small, [1, 4, 6, 4, 1])) == [6, 4, 1]
    assert calls == [1, 4, 6]

    assert list(dropwhile(lambda x: x < 5, [1, 2, 3])) == []
    assert list(dropwhile(lambda x: x < 5, [])) == []

    source = iterate(range(10))
    remaining = dropwhile(lambda x: x < 3, source)
    assert next(remaining) == 3
    assert next(source) == 4
    assert list(remaining) == [5, 6, 7, 8, 9]


def test_predicate_errors():
    g = dropwhile(lambda x: 1 / x > 0.3, [1, 2, 0, 5])
    with pytest.raises(EvaluationError) as excinfo:
        next(g)
    assert "item 0 in DropWhile" in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, ZeroDivisionError)


def test_compress():
    assert compress([1, 2, 3, 4, 5, 6], [1, 0, 1, 0, 1, 1]) == [1, 3, 5, 6]
    assert compress('ABCDEF', [True, False, True]) == ['A', 'C']
    assert compress('AB', [1, 1, 1, 1]) == ['A', 'B']
    assert compress([], []) == []


def test_deprecated_aliases(caplog):
    with caplog.at_level(logging.WARNING, logger="resumable.filtering"):
        assert list(ifilter(lambda x: x > 1, [1, 2, 3])) == [2, 3]
        assert list(ifilterfalse(lambda x: x > 1, [1, 2, 3])) == [1]

    assert caplog.text.count("Call to deprecated function") == 2
