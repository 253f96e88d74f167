"""Silent audio adapter that never touches a sound device."""

import os

from musikkhistorie.domain.ports import AudioPort


class SilentAudioAdapter(AudioPort):
    """No-op audio adapter used for simulation runs.

    Loading still reads each file, so a missing or unreadable asset fails the
    same way it would with a real backend.
    """

    def __init__(self):
        self.played: list[str] = []
        self.stopped: list[str] = []

    def load(self, path: str) -> str:
        with open(path, "rb"):
            pass
        return os.path.basename(path)

    def play(self, handle: str) -> None:
        self.played.append(handle)

    def stop(self, handle: str) -> None:
        self.stopped.append(handle)
