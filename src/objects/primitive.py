"""Shared behaviour of the leaf primitives (Line, Cone).

A primitive owns one adornment descriptor, built in ``construct`` and
fully re-derived from ``params`` on every tick, so any write to the
attribute set between frames shows up on the next frame.
"""

from __future__ import annotations

import logging
from abc import abstractmethod
from dataclasses import fields
from typing import Optional, Type

from core.sceneobject import SceneObject
from objects.adornment import Adornment

logger = logging.getLogger(__name__)


class Primitive(SceneObject):
    native_type: Type[Adornment] = Adornment

    def __init__(self, params=None, **kwargs) -> None:
        super().__init__(params, **kwargs)
        self._native: Optional[Adornment] = None
        self._native_fields = {f.name for f in fields(self.native_type)}

    @property
    def native(self) -> Optional[Adornment]:
        """The descriptor a renderer reads (None before construct)."""
        return self._native

    def construct(self) -> None:
        if self.get_output_target() is None:
            logger.debug("%s.construct(): output target is undefined", type(self).__name__)
        self._native = self.native_type()
        self._sync_native()

    def tick(self, dt: float) -> None:
        if self._native is None or self.is_destroyed:
            return
        self._sync_native()

    def set_native(self, prop: str, value) -> None:
        """Push ``value`` straight into the descriptor, bypassing params."""
        if self._native is None or self.is_destroyed:
            return
        if prop not in self._native_fields:
            logger.info("%s.set_native(): unknown property %r ignored", type(self).__name__, prop)
            return
        setattr(self._native, prop, value)

    def _sync_native(self) -> None:
        p = self.params
        n = self._native
        n.color = p.color
        n.cframe = p.cframe.copy()
        n.visible = p.visible
        n.adornee = self.get_output_target()
        self._sync_size(n)

    @abstractmethod
    def _sync_size(self, native) -> None:
        """Copy the size fields of the concrete primitive into ``native``."""

    def _release_resources(self) -> None:
        if self._native is not None:
            self._native.destroy()


__all__ = ["Primitive"]
