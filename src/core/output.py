from typing import Protocol, runtime_checkable


@runtime_checkable
class OutputTarget(Protocol):
    """Opaque backend handle that an object's visuals attach to."""

    def destroy(self) -> None: ...
