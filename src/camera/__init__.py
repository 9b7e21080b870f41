from .camera import Camera
from .camerascene import SceneWithCamera
from .easing import EasingDirection, EasingStyle, ease
from .tween import CameraTween, Connection, TweenInfo, TweenSignal, TweenState

__all__ = [
    "Camera",
    "CameraTween",
    "Connection",
    "EasingDirection",
    "EasingStyle",
    "SceneWithCamera",
    "TweenInfo",
    "TweenSignal",
    "TweenState",
    "ease",
]
