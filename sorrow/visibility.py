"""Which interface nodes are shown to the player."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, Optional

from .communication import VisibilityTransport
from .state import NODE_VISIBILITY, NodeId, node_for_recipe, node_for_resource

if TYPE_CHECKING:
    from .fulfillment import Recipes
    from .resources import Resources


class Visibility:
    """Visibility of every UI node, following what has been unlocked."""

    def __init__(self) -> None:
        self._visible: dict[NodeId, bool] = dict(NODE_VISIBILITY)
        self._changed: set[NodeId] = set(self._visible)

    def __getitem__(self, node: NodeId) -> bool:
        return self._visible[node]

    def __iter__(self) -> Iterator[tuple[NodeId, bool]]:
        return iter(list(self._visible.items()))

    def _set(self, node: NodeId, visible: bool) -> None:
        if node not in self._visible:
            raise KeyError(node)
        if self._visible[node] != visible:
            self._visible[node] = visible
            self._changed.add(node)

    def recalculate(self, recipes: Recipes, resources: Resources) -> None:
        """Show or hide nodes whose recipe or resource unlock state changed."""
        for recipe in recipes:
            if recipe.unlocked is not None and recipe.unlocked_changed:
                self._set(node_for_recipe(recipe.kind), recipe.unlocked)
        for state in resources:
            if state.unlocked_changed:
                self._set(node_for_resource(state.kind), state.unlocked)

    def collect_changes(self) -> Optional[VisibilityTransport]:
        """A transport of nodes changed since the last clear, or None."""
        if not self._changed:
            return None
        transport = VisibilityTransport()
        for node in self._changed:
            transport.nodes[node] = self._visible[node]
        return transport

    def clear_changes(self) -> None:
        self._changed.clear()