import pytest

from monadkit.union import Either3, Either4, MissingArgumentError

E3_VALUES = {1: 42, 2: True, 3: 1.2}
E4_VALUES = {1: 42, 2: True, 3: 1.2, 4: "Hello"}
E3_FALLBACKS = {1: 21, 2: False, 3: 2.1}
E4_FALLBACKS = {1: 21, 2: False, 3: 2.1, 4: "Bye"}


def make3():
    return {n: Either3(n, v) for n, v in E3_VALUES.items()}


def make4():
    return {n: Either4(n, v) for n, v in E4_VALUES.items()}


def test_new_either3():
    e = make3()
    assert e[1] == Either3(1, 42)
    assert e[2] == Either3(2, True)
    assert e[3] == Either3(3, 1.2)
    assert e[1].index == 1
    assert e[3].index == 3


def test_new_either4():
    e = make4()
    assert e[4] == Either4(4, "Hello")
    assert e[4].index == 4
    assert Either4(1, 42) != Either3(1, 42)


@pytest.mark.parametrize("cls,n", [(Either3, 0), (Either3, 4), (Either4, 5)])
def test_invalid_index(cls, n):
    with pytest.raises(ValueError, match="argument should be between 1 and"):
        cls(n, 1)


def test_is_arg_rejects_out_of_range():
    with pytest.raises(ValueError, match="either3 argument should be between 1 and 3"):
        Either3(1, 42).is_arg(4)


@pytest.mark.parametrize("cls,values", [(Either3, E3_VALUES), (Either4, E4_VALUES)])
def test_is_arg(cls, values):
    for held, value in values.items():
        e = cls(held, value)
        for n in values:
            assert e.is_arg(n) is (n == held)


@pytest.mark.parametrize("cls,values", [(Either3, E3_VALUES), (Either4, E4_VALUES)])
def test_get_arg(cls, values):
    for held, held_value in values.items():
        e = cls(held, held_value)
        for n in values:
            value, ok = e.arg(n)
            if n == held:
                assert ok is True
                assert value == held_value
            else:
                assert ok is False
                assert value is None


@pytest.mark.parametrize(
    "cls,values,label",
    [(Either3, E3_VALUES, "either3"), (Either4, E4_VALUES, "either4")],
)
def test_must_arg(cls, values, label):
    for held, held_value in values.items():
        e = cls(held, held_value)
        for n in values:
            if n == held:
                assert e.must_arg(n) == held_value
            else:
                with pytest.raises(MissingArgumentError) as info:
                    e.must_arg(n)
                assert str(info.value) == f"{label} doesn't contain expected argument {n}"


def test_either3_unpack():
    assert Either3(1, 42).unpack() == (42, None, None)
    assert Either3(3, 1.2).unpack() == (None, None, 1.2)


def test_either4_unpack():
    assert Either4(1, 42).unpack() == (42, None, None, None)
    assert Either4(4, "Hello").unpack() == (None, None, None, "Hello")


def test_either3_get_or_else():
    e = make3()
    assert e[1].arg_or_else(1, 21) == 42
    assert e[1].arg_or_else(2, False) is False
    assert e[1].arg_or_else(3, 2.1) == 2.1
    assert e[2].arg_or_else(1, 21) == 21
    assert e[2].arg_or_else(2, False) is True
    assert e[2].arg_or_else(3, 2.1) == 2.1
    assert e[3].arg_or_else(1, 21) == 21
    assert e[3].arg_or_else(2, False) is False
    assert e[3].arg_or_else(3, 2.1) == 1.2


def test_either4_get_or_else():
    for held, e in make4().items():
        for n in range(1, 5):
            expected = E4_VALUES[n] if n == held else E4_FALLBACKS[n]
            assert e.arg_or_else(n, E4_FALLBACKS[n]) == expected


def test_either3_get_or_none():
    e = make3()
    assert e[1].arg_or_none(1) == 42
    assert e[1].arg_or_none(2) is None
    assert e[1].arg_or_none(3) is None
    assert e[2].arg_or_none(1) is None
    assert e[2].arg_or_none(2) is True
    assert e[3].arg_or_none(3) == 1.2


def test_either4_get_or_none():
    e = make4()
    assert e[4].arg_or_none(4) == "Hello"
    assert e[4].arg_or_none(1) is None
    assert e[3].arg_or_none(3) == 1.2
    assert e[3].arg_or_none(4) is None


@pytest.mark.parametrize("cls,values", [(Either3, E3_VALUES), (Either4, E4_VALUES)])
def test_for_each(cls, values):
    for held, held_value in values.items():
        e = cls(held, held_value)
        calls = []
        callbacks = [(lambda v, i=i: calls.append((i, v))) for i in values]
        assert e.for_each(*callbacks) is None
        assert calls == [(held, held_value)]


def test_for_each_wrong_callback_count():
    with pytest.raises(TypeError):
        Either3(1, 42).for_each(lambda v: None, lambda v: None)


def test_either3_match():
    seen = []

    def cbs():
        return (
            lambda v: (seen.append(v), Either3(1, 21))[1],
            lambda v: (seen.append(v), Either3(2, False))[1],
            lambda v: (seen.append(v), Either3(3, 2.1))[1],
        )

    assert Either3(1, 42).match(*cbs()) == Either3(1, 21)
    assert Either3(2, True).match(*cbs()) == Either3(2, False)
    assert Either3(3, 1.2).match(*cbs()) == Either3(3, 2.1)
    assert seen == [42, True, 1.2]


def test_either4_match():
    seen = []
    cbs = [
        (lambda v, n=n: (seen.append(v), Either4(n, E4_FALLBACKS[n]))[1])
        for n in range(1, 5)
    ]
    for held, e in make4().items():
        assert e.match(*cbs) == Either4(held, E4_FALLBACKS[held])
    assert seen == [42, True, 1.2, "Hello"]


def test_match_wrong_callback_count():
    with pytest.raises(TypeError):
        Either4(1, 42).match(lambda v: v)


@pytest.mark.parametrize(
    "factory,cls,values,fallbacks,arity",
    [
        (make3, Either3, E3_VALUES, E3_FALLBACKS, 3),
        (make4, Either4, E4_VALUES, E4_FALLBACKS, 4),
    ],
)
def test_map_arg(factory, cls, values, fallbacks, arity):
    for held, e in factory().items():
        for n in range(1, arity + 1):
            seen = []

            def mapper(v, n=n):
                seen.append(v)
                return cls(n, fallbacks[n])

            result = e.map_arg(n, mapper)
            if n == held:
                assert result == cls(n, fallbacks[n])
                assert seen == [values[held]]
            else:
                assert result == e
                assert seen == []