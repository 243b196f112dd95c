import itertools
import pytest
from resumable import Generator, coroutine, iterate, combinations, \
    combinations_with_replacement, permutations, smap, sfilter, \
    ExhaustionError, EvaluationError, seterr


def test_resume():
    g = Generator(lambda: iter([1, 2]))
    assert g.value is None
    assert not g.done

    assert g.resume() == (1, False)
    assert g.value == 1
    assert g.resume() == (2, False)
    assert g.resume() == (None, True)
    assert g.done
    assert g.value is None
    assert g.n_emitted == 2

    for _ in range(3):
        with pytest.raises(ExhaustionError):
            g.resume()


def test_iteration():
    g = iterate([1, 2, 3])
    assert iter(g) is g
    assert list(g) == [1, 2, 3]

    with pytest.raises(ExhaustionError):
        next(g)
    with pytest.raises(ExhaustionError):
        list(g)

    g = iterate([])
    with pytest.raises(StopIteration):
        next(g)
    with pytest.raises(ExhaustionError):
        next(g)


def test_coroutine():
    calls = []

    @coroutine
    def countdown(n):
        calls.append(n)
        while n > 0:
            yield n
            n -= 1

    g = countdown(3)
    assert isinstance(g, Generator)
    assert calls == []  # body starts on first resumption
    assert g.resume() == (3, False)
    assert calls == [3]
    assert list(g) == [2, 1]
    assert countdown.__name__ == "countdown"


def test_iterate():
    g = iterate('abc')
    assert iterate(g) is g

    assert next(g) == 'a'
    assert list(iterate(g)) == ['b', 'c']
    assert g.done


def test_pause_resume():
    expected = list(itertools.combinations('ABCDE', 3))

    g = combinations('ABCDE', 3)
    head = [next(g) for _ in range(4)]
    assert head == expected[:4]
    assert g.indices == [0, 2, 3]

    tail = list(g)
    assert head + tail == expected


@pytest.mark.parametrize('func, reference', [
    (combinations, itertools.combinations),
    (combinations_with_replacement, itertools.combinations_with_replacement),
    (permutations, itertools.permutations)])
def test_independent_instances(func, reference):
    expected = list(reference(range(6), 3))
    a = func(range(6), 3)
    b = func(range(6), 3)

    out_a, out_b = [], []
    for i in range(12):
        out_a.append(next(a))
        if i % 3 == 0:
            out_b.append(next(b))

    out_b.extend(b)
    out_a.extend(a)

    assert out_a == expected
    assert out_b == expected


def test_body_failure():
    @coroutine
    def failing():
        yield 1
        raise KeyError('boom')

    g = failing()
    assert next(g) == 1
    with pytest.raises(KeyError):
        next(g)
    assert g.done

    for _ in range(2):
        with pytest.raises(ExhaustionError, match="KeyError"):
            g.resume()


def test_failure_isolation():
    data = [1, 2, 0, 4]
    bad = smap(lambda x: 1 / x, data)
    good = smap(lambda x: x * 2, data)

    assert next(bad) == 1
    assert next(good) == 2

    with pytest.raises(EvaluationError):
        list(bad)

    assert list(good) == [4, 0, 8]


class CustomException(Exception):
    pass


@pytest.mark.parametrize('evaluation', ['wrap', 'passthrough'])
def test_nested_errors(evaluation):
    def fail(x):
        if x == 3:
            raise CustomException
        return True

    seterr(evaluation)
    try:
        m = smap(lambda x: x + 1, sfilter(fail, range(10)))
        error_t = EvaluationError if evaluation == "wrap" else CustomException

        assert [next(m) for _ in range(3)] == [1, 2, 3]
        with pytest.raises(error_t) as excinfo:
            next(m)

        if evaluation == "wrap":
            msg = str(excinfo.value)
            assert msg.startswith("Failed to evaluate item 3 in Filtering")
            assert "test_generator.py" in msg
            assert isinstance(excinfo.value.__cause__, CustomException)

        with pytest.raises(ExhaustionError):
            next(m)

    finally:
        seterr('wrap')


def test_seterr():
    assert seterr() == 'wrap'
    assert seterr('passthrough') == 'passthrough'
    assert seterr() == 'passthrough'
    assert seterr('wrap') == 'wrap'

    with pytest.raises(ValueError):
        seterr('ignore')


def test_interrupted_body():
    def pred(x):
        pred.calls += 1
        if pred.calls == 3:
            raise KeyboardInterrupt
        return True

    pred.calls = 0

    g = sfilter(pred, range(10))
    assert [next(g) for _ in range(2)] == [0, 1]

    with pytest.raises(KeyboardInterrupt):
        next(g)
    assert g.done

    with pytest.raises(ExhaustionError, match="KeyboardInterrupt"):
        g.resume()
