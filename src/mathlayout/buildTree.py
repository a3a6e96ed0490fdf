from . import spacing
from .Atom import Atom
from .Options import Options
from .Settings import Settings
from .boxTree import Box, makeStruts


# Lays out a list of atoms into a box tree. The spacing between the boxes is
# applied once the whole tree is built, since the type of a box can change
# with the boxes around it.
def buildTree(atoms, settings=None):
    if settings is None:
        settings = Settings()

    # Setup the default options
    options = Options(settings=settings)

    body = Atom.createBox(options, atoms) or Box(None)
    base = Box(body, classes=["ML__base"])
    spacing.applyInterBoxSpacing(base, options)

    result = makeStruts(base, classes=["ML__mathlayout"])
    if settings.displayMode:
        result.classes.append("ML__display")
    return result


def render(atoms, settings=None):
    '''
    Lay out a list of atoms and return the root box.
    '''
    return buildTree(atoms, settings)


def renderAtom(atom, settings=None):
    '''
    Lay out a single atom and return the root box.
    '''
    return buildTree([atom], settings)
