# This is the error thrown by the layout engine when a box tree cannot be
# built. It is raised for structural defects in the atom tree (a branch
# missing its `first` sentinel, a vertical list anchored on a gap, ...) and,
# when `throwOnError` is set, for constructs that cannot be laid out.

class LayoutError(Exception):
    def __init__(self, message, atom=None):
        error = "Layout error: " + message

        if atom is not None:
            error += " (in atom of type '{0}')".format(atom.type)

        super(LayoutError, self).__init__(error)

        self.rawMessage = message
        self.atom = atom
