# This file handles the spacing between the boxes of a math list, as laid out
# in the TeXbook, p. 170:
#
# > In fact, TeX's rules for spacing in formulas are fairly simple. A
# > formula is converted to a math list as described at the end of Chapter 17,
# > and the math list consists chiefly of "atoms" of eight basic types:
# > Ord (ordinary), Op (large operator), Bin (binary operation),
# > Rel (relation), Open (opening), Close (closing), Punct (punctuation),
# > and Inner (a delimited subformula).
#
# Superscripts and subscripts are part of the box they are attached to, and
# don't change its type.

import logging

log = logging.getLogger(__name__)

# The spacing between two boxes, by the type of the box on the left and the
# type of the box on the right. The values are the registers
#   3: \thinmuskip
#   4: \medmuskip
#   5: \thickmuskip
INTER_BOX_SPACING = {
    "ord": {"op": 3, "bin": 4, "rel": 5, "inner": 3},
    "op": {"ord": 3, "op": 3, "rel": 5, "inner": 3},
    "bin": {"ord": 4, "op": 4, "open": 4, "inner": 4},
    "rel": {"ord": 5, "op": 5, "open": 5, "inner": 5},
    "close": {"op": 3, "bin": 4, "rel": 5, "inner": 3},
    "punct": {"ord": 3, "op": 3, "rel": 3, "open": 3, "punct": 3, "inner": 3},
    "inner": {"ord": 3, "op": 3, "bin": 4, "rel": 5, "open": 3, "punct": 3, "inner": 3},
}

# The table used when the box is tightly spaced (scriptstyle and
# scriptscriptstyle)
INTER_BOX_TIGHT_SPACING = {
    "ord": {"op": 3},
    "op": {"ord": 3, "op": 3},
    "close": {"op": 3},
    "inner": {"op": 3},
}

SKIP_REGISTERS = {
    3: "thinmuskip",
    4: "medmuskip",
    5: "thickmuskip",
}

# The types after which a Bin is not binary
UNARY_CONTEXT = frozenset(["first", "middle", "bin", "op", "rel", "open", "punct"])

# Boxes that are passed over: they are never spaced, and the box before them
# stays the previous box of the one after them.
TRANSPARENT_TYPES = frozenset(["", "first", "skip", "spacing"])


# Calls `f(prev, cur)` for each box of the list, with `prev` the previous box
# in the same math list (None at the start of a list):
#  - the children of a `lift` box are part of the current list
#  - the children of an `ignore` box form a new list
#  - the children of any other box form a new list, after the box itself
# Returns the last box of the list.
def traverseBoxes(boxes, f, prev=None):
    for cur in boxes or []:
        if cur.type == "lift":
            prev = traverseBoxes(cur.children, f, prev)
        elif cur.type == "ignore":
            traverseBoxes(cur.children, f)
        elif cur.type in TRANSPARENT_TYPES:
            traverseBoxes(cur.children, f)
        else:
            f(prev, cur)
            traverseBoxes(cur.children, f)
            prev = cur
    return prev


# Handle proper spacing of, e.g. "-4" vs "1-4", by adjusting the box types
def adjustType(boxes):
    def adjust(prev, cur):
        # > 5. If the current item is a Bin atom, and if this was the first atom
        # >   in the list, or if the most recent previous atom was Bin, Op, Rel,
        # >   Open, or Punct, change the current Bin to Ord and continue with
        # >   Rule 14.
        #                                                    -- TeXbook p. 442
        if cur.type == "bin" and (prev is None or prev.type in UNARY_CONTEXT):
            cur.type = "ord"

        # > 6. If the current item is a Rel or Close or Punct atom, and if the
        # >    most recent previous atom was Bin, change that previous Bin to Ord.
        if prev is not None and prev.type == "bin" and cur.type in ("rel", "close", "punct"):
            prev.type = "ord"

    traverseBoxes(boxes, adjust)


# Returns the skip, in em, between a box of type `prevType` and `cur`
def getSkip(prevType, cur, options):
    table = INTER_BOX_TIGHT_SPACING if cur.isTight else INTER_BOX_SPACING
    hskip = table.get(prevType, {}).get(cur.type)
    if hskip is None:
        return 0
    return options.getRegisterAsEm(SKIP_REGISTERS[hskip])


# Adjusts the box types according to the TeX rules, then inserts the
# corresponding spacing as a left margin of the boxes.
def applyInterBoxSpacing(root, options):
    if not root.children:
        return root

    boxes = root.children
    adjustType(boxes)

    def addSkip(prev, cur):
        if prev is None:
            return
        skip = getSkip(prev.type, cur, options)
        if skip:
            log.debug("Adding %.3fem between %s and %s", skip, prev.type, cur.type)
            cur.left += skip

    traverseBoxes(boxes, addSkip)
    return root
