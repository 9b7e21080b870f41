import math
import numpy as np
from pygame.math import Vector3

from config import CAMERA_FOV, CAMERA_START_POSITION
from core.attributes import CFrame


class Camera:
    """Scene camera: a transform plus a cached view basis.

    Scenes animate it through ``cframe``; whatever renders the scene reads
    ``position``, ``rotation``, ``field_of_view`` and the rotation matrix.
    """

    def __init__(self, position=None, rotation=None, fov=CAMERA_FOV, name="Camera"):
        self.name = name
        self.position = Vector3(position) if position is not None else Vector3(CAMERA_START_POSITION)
        self.rotation = Vector3(rotation) if rotation is not None else Vector3(0, 0, 0)  # pitch (x), yaw (y), roll (z)
        self.field_of_view = float(fov)

        # NumPy rotation matrix (world -> camera)
        self._R = np.eye(3, dtype=np.float64)
        self._right = Vector3(1, 0, 0)
        self._forward = Vector3(0, 0, -1)

        self.update_rotation()

    @property
    def cframe(self) -> CFrame:
        """Copy of the current transform; assign a CFrame to move the camera."""
        return CFrame(Vector3(self.position), Vector3(self.rotation))

    @cframe.setter
    def cframe(self, value: CFrame) -> None:
        self.position = Vector3(value.position)
        self.rotation = Vector3(value.rotation)
        self.update_rotation()

    @property
    def rotation_matrix(self) -> np.ndarray:
        return self._R.copy()

    @property
    def forward(self) -> Vector3:
        return Vector3(self._forward)

    @property
    def right(self) -> Vector3:
        return Vector3(self._right)

    def update_rotation(self):
        """Precompute direction vectors (Vector3) and rotation matrix (numpy)."""
        cp = math.cos(self.rotation.x)
        sp = math.sin(self.rotation.x)
        cy = math.cos(self.rotation.y)
        sy = math.sin(self.rotation.y)

        self._right = Vector3(cy, 0, -sy)
        # Full forward vector (with vertical component when pitched)
        self._forward = Vector3(-cp * sy, sp, -cp * cy)

        # yaw (around Y) then pitch (around X)
        Ry = np.array(
            [[cy, 0.0, -sy], [0.0, 1.0, 0.0], [sy, 0.0, cy]], dtype=np.float64
        )
        Rx = np.array(
            [[1.0, 0.0, 0.0], [0.0, cp, -sp], [0.0, sp, cp]], dtype=np.float64
        )
        self._R = Rx @ Ry

    def world_to_camera(self, point) -> Vector3:
        """Express a world-space point in camera space."""
        rel = Vector3(point) - self.position
        x, y, z = self._R @ np.array([rel.x, rel.y, rel.z], dtype=np.float64)
        return Vector3(float(x), float(y), float(z))
