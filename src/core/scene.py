from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional, Tuple

from core.attributes import Attributes
from core.sceneobject import SceneObject


@dataclass
class SceneAttributes(Attributes):
    name: str = ""
    destroy_on_completed: bool = False


class Scene(SceneObject):
    """Root-level object holding a named collection of scene objects.

    Subclasses implement ``construct`` to populate the scene, typically
    through :meth:`add`.
    """

    attributes_type = SceneAttributes

    @property
    def name(self) -> str:
        return self.params.name

    def add(self, objects: Mapping[str, SceneObject]) -> None:
        for name, obj in objects.items():
            self.add_child(name, obj)

    def get(self, names: Iterable[str]) -> List[Tuple[str, Optional[SceneObject]]]:
        """Look up several children; missing names pair with None."""
        return [(name, self.get_child(name)) for name in names]

    def tick(self, dt: float) -> None:
        self.tick_all_children(dt)


__all__ = ["Scene", "SceneAttributes"]
