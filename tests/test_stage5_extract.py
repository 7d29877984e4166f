import pytest

from pyoptional import InvalidArgumentError, Optional

NUMBER = 10
STRING = "ForTestPurpose"


class Counter:
    def __init__(self, result=None):
        self.result = result
        self.calls = 0
        self.args = []

    def __call__(self, *args):
        self.calls += 1
        self.args.extend(args)
        return self.result


class Person:
    def __init__(self, name: str):
        self.name = name


# or_else

def test_or_else_on_empty_returns_other():
    assert Optional.empty().or_else(NUMBER + 1) == NUMBER + 1
    assert Optional.empty().or_else(STRING) == STRING
    assert Optional.empty().or_else() is None
    assert Optional.of_nullable(None).or_else(42) == 42

def test_or_else_on_present_returns_value():
    assert Optional.of(7).or_else(42) == 7
    assert Optional.of(NUMBER).or_else(None) == NUMBER
    assert Optional.of(0).or_else(5) == 0

# or_else_get

def test_or_else_get_on_present_skips_supplier():
    supplier = Counter(object())
    assert Optional.of(NUMBER).or_else_get(supplier) == NUMBER
    assert Optional.of(STRING).or_else_get(supplier) == STRING
    assert supplier.calls == 0

def test_or_else_get_without_supplier_raises():
    with pytest.raises(InvalidArgumentError):
        Optional.empty().or_else_get(None)
    with pytest.raises(InvalidArgumentError):
        Optional.empty().or_else_get()

def test_or_else_get_invokes_supplier_once():
    fallback = {"name": STRING, "age": 12}
    supplier = Counter(fallback)
    assert Optional.empty().or_else_get(supplier) is fallback
    assert supplier.calls == 1

def test_or_else_get_may_return_none():
    assert Optional.empty().or_else_get(lambda: None) is None

# or_else_throw

def test_or_else_throw_on_present_skips_supplier():
    supplier = Counter(RuntimeError("error"))
    assert Optional.of(NUMBER).or_else_throw(supplier) == NUMBER
    assert Optional.of(STRING).or_else_throw(supplier) == STRING
    assert supplier.calls == 0

def test_or_else_throw_without_supplier_raises():
    with pytest.raises(InvalidArgumentError):
        Optional.empty().or_else_throw(None)
    with pytest.raises(InvalidArgumentError):
        Optional.empty().or_else_throw()

def test_or_else_throw_raises_supplied_exception_unmodified():
    error = TypeError("error")
    supplier = Counter(error)
    with pytest.raises(TypeError) as excinfo:
        Optional.empty().or_else_throw(supplier)
    assert excinfo.value is error
    assert supplier.calls == 1

def test_or_else_throw_accepts_exception_class():
    with pytest.raises(KeyError):
        Optional.empty().or_else_throw(KeyError)

def test_or_else_throw_supplier_errors_propagate():
    def broken():
        raise LookupError("supplier failed")

    with pytest.raises(LookupError, match="supplier failed"):
        Optional.empty().or_else_throw(broken)

# if_present

def test_if_present_without_action_raises():
    with pytest.raises(InvalidArgumentError):
        Optional.of(NUMBER).if_present()
    with pytest.raises(InvalidArgumentError):
        Optional.of(STRING).if_present(None)

def test_if_present_on_empty_skips_action():
    action = Counter()
    assert Optional.empty().if_present(action) is None
    Optional.empty().if_present()
    assert action.calls == 0

def test_if_present_invokes_action_with_value():
    action = Counter()
    Optional.of(NUMBER).if_present(action)
    Optional.of(STRING).if_present(action)
    assert action.calls == 2
    assert action.args == [NUMBER, STRING]

def test_if_present_action_can_mutate_payload():
    person = Person(STRING)
    opt = Optional.of(person)

    def rename(p):
        p.name = STRING + "V2"

    opt.if_present(rename)
    assert opt.get() is person
    assert opt.get().name == STRING + "V2"

def test_action_errors_propagate():
    def boom(value):
        raise RuntimeError(f"boom {value}")

    with pytest.raises(RuntimeError, match="boom 10"):
        Optional.of(NUMBER).if_present(boom)

# if_present_or_else

def test_if_present_or_else_present_branch():
    action, empty_action = Counter(), Counter()
    Optional.of(NUMBER).if_present_or_else(action, empty_action)
    assert action.calls == 1
    assert action.args == [NUMBER]
    assert empty_action.calls == 0

def test_if_present_or_else_empty_branch():
    action, empty_action = Counter(), Counter()
    Optional.empty().if_present_or_else(action, empty_action)
    assert action.calls == 0
    assert empty_action.calls == 1
    assert empty_action.args == []

def test_if_present_or_else_checks_only_taken_branch():
    with pytest.raises(InvalidArgumentError):
        Optional.of(NUMBER).if_present_or_else(None, Counter())
    with pytest.raises(InvalidArgumentError):
        Optional.empty().if_present_or_else(Counter(), None)
    with pytest.raises(InvalidArgumentError):
        Optional.empty().if_present_or_else(Counter())

    # the branch not taken may be missing
    Optional.empty().if_present_or_else(None, Counter())
    person = Person(STRING)
    Optional.of(person).if_present_or_else(lambda p: setattr(p, "name", "V2"))
    assert person.name == "V2"
