import pytest

from mathlayout import Atom, Options, Settings


def _sym(type, value):
    return Atom(type, value=value)


# Returns the boxes of the tree matching `predicate`, depth first
def _find(root, predicate):
    return [box for box in root.walk() if predicate(box)]


@pytest.fixture
def sym():
    return _sym


@pytest.fixture
def ords():
    return lambda text: [_sym("ord", char) for char in text]


@pytest.fixture
def find():
    return _find


@pytest.fixture
def findValue():
    def findValue(root, value):
        result = _find(root, lambda box: box.value == value)
        assert result, "no box holds {0!r}".format(value)
        return result[0]
    return findValue


@pytest.fixture
def findClass():
    def findClass(root, cls):
        result = _find(root, lambda box: cls in box.classes)
        assert result, "no box has the class {0!r}".format(cls)
        return result[0]
    return findClass


@pytest.fixture
def textOptions():
    return Options(settings=Settings())


@pytest.fixture
def displayOptions():
    return Options(settings=Settings(displayMode=True))
