from functools import partial

import pytest

import uniqset
from uniqset import (
    GeneratorCallableError,
    InvalidArgumentError,
    NoneArgumentError,
    NotCallableError,
    NotSetLikeError,
    UniqueSet,
)


def identity(x):
    return x


def generator(x):
    yield x


async def async_generator(x):
    yield x


async def coroutine(x):
    return False


receiver_calls = [
    lambda source: UniqueSet.is_empty(source),
    lambda source: UniqueSet.every(source, identity),
    lambda source: UniqueSet.exists(source, identity),
    lambda source: UniqueSet.filter(source, identity),
    lambda source: UniqueSet.map(source, identity),
    lambda source: UniqueSet.fold(source, lambda s, e: s, 0),
    lambda source: UniqueSet.fold_right(source, lambda e, s: s, 0),
    lambda source: UniqueSet.partition(source, identity),
    lambda source: UniqueSet.is_subset_of(source, UniqueSet()),
    lambda source: UniqueSet.is_superset_of(source, UniqueSet()),
    lambda source: UniqueSet.is_proper_subset_of(source, UniqueSet()),
    lambda source: UniqueSet.is_proper_superset_of(source, UniqueSet()),
    lambda source: UniqueSet.union(source),
    lambda source: UniqueSet.intersect(source),
    lambda source: UniqueSet.difference(source, UniqueSet()),
    lambda source: UniqueSet.to_list(source),
    lambda source: UniqueSet.to_dict(source),
]


@pytest.mark.parametrize("call", receiver_calls)
def test_none_receiver(call):
    with pytest.raises(NoneArgumentError):
        call(None)


@pytest.mark.parametrize(
    "function",
    [
        uniqset.is_empty,
        uniqset.to_list,
        uniqset.to_dict,
        uniqset.union,
        uniqset.intersect,
    ],
)
def test_none_source_in_free_functions(function):
    with pytest.raises(NoneArgumentError) as info:
        function(None)

    assert info.value.name == "source"


@pytest.mark.parametrize(
    "method",
    [
        UniqueSet.is_subset_of,
        UniqueSet.is_superset_of,
        UniqueSet.is_proper_subset_of,
        UniqueSet.is_proper_superset_of,
        UniqueSet.difference,
    ],
)
def test_none_other(method):
    with pytest.raises(NoneArgumentError) as info:
        method(UniqueSet.of(1), None)

    assert info.value.name == "other"


@pytest.mark.parametrize("method", [UniqueSet.fold, UniqueSet.fold_right])
def test_none_state(method):
    with pytest.raises(NoneArgumentError) as info:
        method(UniqueSet.of(1), lambda a, b: a, None)

    assert info.value.name == "state"


@pytest.mark.parametrize("method", [UniqueSet.fold, UniqueSet.fold_right])
def test_none_state_is_reported_before_bad_folder(method):
    with pytest.raises(NoneArgumentError):
        method(UniqueSet.of(1), 5, None)


callback_methods = [
    UniqueSet.every,
    UniqueSet.exists,
    UniqueSet.filter,
    UniqueSet.map,
    UniqueSet.partition,
    lambda source, callback: source.fold(callback, 0),
    lambda source, callback: source.fold_right(callback, 0),
]


@pytest.mark.parametrize("method", callback_methods)
@pytest.mark.parametrize("callback", [None, 5, "x", [identity]])
def test_not_callable(method, callback):
    with pytest.raises(NotCallableError):
        method(UniqueSet.of(1, 2), callback)


@pytest.mark.parametrize("method", callback_methods)
@pytest.mark.parametrize(
    "callback", [generator, async_generator, coroutine, partial(generator), partial(coroutine)]
)
def test_generator_callable(method, callback):
    with pytest.raises(GeneratorCallableError):
        method(UniqueSet.of(1, 2), callback)


@pytest.mark.parametrize("method", callback_methods)
def test_callbacks_are_validated_on_empty_sets(method):
    with pytest.raises(InvalidArgumentError):
        method(UniqueSet.empty(), generator)


def test_callable_objects_are_accepted():
    class IsPositive:
        def __call__(self, x):
            return x > 0

    assert UniqueSet.of(1, 2).every(IsPositive())
    assert UniqueSet.of(-1, 2).filter(IsPositive()).to_list() == [2]


class YieldsOnCall:
    def __call__(self, x):
        yield x


class AwaitsOnCall:
    async def __call__(self, x):
        return True


@pytest.mark.parametrize("method", callback_methods)
@pytest.mark.parametrize("callback", [YieldsOnCall(), AwaitsOnCall()])
def test_suspending_callable_objects(method, callback):
    with pytest.raises(GeneratorCallableError):
        method(UniqueSet.of(1, 2), callback)


def test_classes_are_accepted_as_callbacks():
    assert UniqueSet.of(1, 2).map(str).to_list() == ["1", "2"]


@pytest.mark.parametrize("method", [UniqueSet.union, UniqueSet.intersect])
def test_not_set_like(method):
    with pytest.raises(NotSetLikeError) as info:
        method(UniqueSet.of(1), {1}, [1, 2])

    assert info.value.position == 1
    assert info.value.value == [1, 2]


@pytest.mark.parametrize("method", [UniqueSet.union, UniqueSet.intersect])
def test_none_in_others_is_not_set_like(method):
    with pytest.raises(NotSetLikeError):
        method(UniqueSet.of(1), None)


def test_errors_are_type_errors():
    with pytest.raises(TypeError):
        UniqueSet.of(1).map("not a function")


def test_error_messages():
    assert str(NoneArgumentError("other")) == "Expected other to be a value, but got None"
    assert "predicate" in str(NotCallableError("predicate", 5))
    assert "int" in str(NotCallableError("predicate", 5))
    assert "generator" in str(GeneratorCallableError("folder", generator))
    assert "argument 2" in str(NotSetLikeError(2, [1]))
