"""Docker goal selector consumed by packaging callers."""

from __future__ import annotations

from enum import Enum


class DockerGoal(Enum):
    """Build goal deciding what happens to a packaged Docker image."""

    # Export the image locally as a ``.tar`` file.
    SAVE = "save"

    # Push the image to a remote registry.
    PUSH = "push"

    @property
    def code(self) -> str:
        return self.value

    @classmethod
    def of(cls, code: str | None) -> DockerGoal | None:
        """Return the goal whose code matches ``code`` case-insensitively.

        Unknown codes, including padded ones like ``" push "``, return ``None``
        rather than raising; callers decide whether that is an error.
        """
        if code is None:
            return None

        wanted = code.casefold()
        for goal in cls:
            if goal.code.casefold() == wanted:
                return goal
        return None
