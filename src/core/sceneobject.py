"""Base scene object: ownership of children, enable gating and the
construct / tick / destroy lifecycle.

Hosts (the engine, a parent object) call the underscored wrappers
``_construct`` and ``_tick``; subclasses implement ``construct`` and
``tick``. Data only flows downward: a parent pushes values into its
children during its own tick.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import Dict, Optional

from core.attributes import Attributes
from core.output import OutputTarget

logger = logging.getLogger(__name__)


class LifecycleState(Enum):
    LIVE = auto()
    DESTROYING = auto()
    DESTROYED = auto()


class SceneObject(ABC):
    """A node of the scene graph.

    Parameters
    ----------
    params : Attributes | None
        Initial attribute set. A full copy is stored in ``self.params``;
        the caller's instance is never mutated. Defaults to a fresh
        ``attributes_type()``.
    output_target : OutputTarget | None
        Backend handle owned by this node. Usually only roots carry one;
        descendants resolve it through :meth:`get_output_target`.
    """

    # Class-level default; instances may override, `disabled` flips it.
    enabled: bool = True
    attributes_type = Attributes

    def __init__(
        self,
        params: Optional[Attributes] = None,
        *,
        output_target: Optional[OutputTarget] = None,
    ) -> None:
        initial = params if params is not None else self.attributes_type()
        self.params = initial.copy()
        self.children: Dict[str, SceneObject] = {}
        self.parent: Optional[SceneObject] = None
        self.output_target = output_target
        self.state = LifecycleState.LIVE

    def __repr__(self) -> str:
        return f"<{type(self).__name__} at 0x{id(self):x}>"

    @property
    def is_destroyed(self) -> bool:
        return self.state is not LifecycleState.LIVE

    def _refuse_if_destroyed(self, operation: str) -> bool:
        if self.state is LifecycleState.LIVE:
            return False
        logger.warning("%s(): %r is already destroyed, ignoring", operation, self)
        return True

    # ------------------------------------------------------------------
    # Children
    # ------------------------------------------------------------------
    def add_child(self, name: str, child: SceneObject) -> None:
        """Register ``child`` under ``name``.

        An existing child with the same name is detached but not destroyed.
        """
        if self._refuse_if_destroyed("add_child"):
            return
        previous = self.children.get(name)
        if previous is not None and previous is not child:
            previous.parent = None
        self.children[name] = child
        child.parent = self

    def remove_child(self, name: str) -> None:
        child = self.children.pop(name, None)
        if child is not None:
            child.parent = None
            child.destroy()

    def get_child(self, name: str) -> Optional[SceneObject]:
        return self.children.get(name)

    def get_output_target(self) -> Optional[OutputTarget]:
        """Nearest output target up the parent chain, or None."""
        node: Optional[SceneObject] = self
        while node is not None:
            if node.output_target is not None:
                return node.output_target
            node = node.parent
        return None

    def set_param(self, key: str, value) -> None:
        # Unchecked on purpose; ticks re-read params every frame.
        setattr(self.params, key, value)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    @abstractmethod
    def construct(self) -> None:
        """Build this object's state and children. Called once."""

    @abstractmethod
    def tick(self, dt: float) -> None:
        """Per-frame update with elapsed seconds ``dt``."""

    def _construct(self) -> None:
        if self._refuse_if_destroyed("_construct"):
            return
        if not self.enabled:
            logger.debug("_construct(): %r is disabled, skipping", self)
            return

        self.construct()

        # Snapshot after construct() so children it added are visited too
        for child in list(self.children.values()):
            child._construct()

    def _tick(self, dt: float) -> None:
        if self.state is not LifecycleState.LIVE or not self.enabled:
            return
        self.tick(dt)

    def tick_all_children(self, dt: float) -> None:
        """Tick every live child directly, bypassing the children's enable gate."""
        for child in list(self.children.values()):
            if child.is_destroyed:
                continue
            child.tick(dt)

    def _release_resources(self) -> None:
        """Hook for subclasses holding backend descriptors."""

    def destroy(self) -> bool:
        """Tear down the subtree, children first.

        Returns False (and does nothing) when already destroyed.
        """
        if self._refuse_if_destroyed("destroy"):
            return False
        logger.debug("destroy(): destroying %r", self)
        self.state = LifecycleState.DESTROYING

        for child in list(self.children.values()):
            child.destroy()

        self._release_resources()
        if self.output_target is not None:
            self.output_target.destroy()

        self.state = LifecycleState.DESTROYED
        return True


def disabled(cls):
    """Class decorator: instances start with ``enabled = False``."""
    if isinstance(cls, type) and issubclass(cls, SceneObject):
        cls.enabled = False
        logger.debug("disabled(): disabled %s", cls.__name__)
    else:
        logger.warning("disabled(): cannot disable %r, it is not a SceneObject", cls)
    return cls


__all__ = ["LifecycleState", "SceneObject", "disabled"]
