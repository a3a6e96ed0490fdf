# This is the main entry point of the layout engine. Here, we expose the atom
# tree, the functions laying it out into a box tree, and the LayoutError
# class to check if errors raised come from the layout.

import logging

from .Atom import (
    AccentOptions, Atom, BoxOptions, EncloseOptions, GenfracOptions, GroupOptions,
    LeftRightOptions, LineOptions, OperatorOptions, OverlapOptions, OverunderOptions,
    PhantomOptions, RuleOptions, SizedDelimOptions, SpacingOptions,
)
from .LayoutError import LayoutError
from .Options import Options
from .Settings import Settings
from .boxTree import Box
from .buildCommon import VBox
from .buildTree import render, renderAtom
from .environments import ArrayAtom, ArrayOptions, getEnvironmentOptions

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AccentOptions", "ArrayAtom", "ArrayOptions", "Atom", "Box", "BoxOptions",
    "EncloseOptions", "GenfracOptions",
    "GroupOptions", "LayoutError", "LeftRightOptions", "LineOptions",
    "OperatorOptions", "Options", "OverlapOptions", "OverunderOptions",
    "PhantomOptions", "RuleOptions", "Settings", "SizedDelimOptions",
    "SpacingOptions", "VBox", "getEnvironmentOptions", "render", "renderAtom",
]
