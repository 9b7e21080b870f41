FPS = 60
# "info" or "verbose" (verbose maps to DEBUG)
LOG_LEVEL = "info"
# Line primitive defaults
LINE_THICKNESS = 8.0
# Cone primitive defaults (the arrow head of a Vector)
CONE_RADIUS = 0.25
CONE_HEIGHT = 1.0
# Camera defaults
CAMERA_FOV = 70
CAMERA_START_POSITION = (0, 0, -10)
# Used by move_camera_to callers that do not care about timing
DEFAULT_TWEEN_DURATION = 1.0
