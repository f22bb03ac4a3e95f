"""Selection state, controller, resolution and change notification."""

from skuselect.selection.controller import SelectionController
from skuselect.selection.emitter import ChangeCallback, ChangeEmitter, ChangeListeners
from skuselect.selection.resolver import VariantResolver, VariantSummary
from skuselect.selection.state import FlagSnapshot, SelectionState

__all__ = [
    "SelectionState",
    "FlagSnapshot",
    "SelectionController",
    "VariantResolver",
    "VariantSummary",
    "ChangeEmitter",
    "ChangeListeners",
    "ChangeCallback",
]
