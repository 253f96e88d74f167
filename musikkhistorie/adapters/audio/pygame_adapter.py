"""pygame.mixer audio adapter."""

import logging

import pygame

from musikkhistorie.domain.ports import AudioPort

logger = logging.getLogger("musikkhistorie.audio.pygame")


class PygameAudioAdapter(AudioPort):
    """Decodes files into ``pygame.mixer.Sound`` buffers.

    ``Sound.play`` picks a free mixer channel, so a second ``play`` of the
    same sound overlaps the first instead of restarting it. ``Sound.stop``
    silences every channel playing that sound.
    """

    def __init__(self):
        if not pygame.mixer.get_init():
            pygame.mixer.init()
            logger.info("Mixer initialized (%s)", pygame.mixer.get_init())

    def load(self, path: str) -> pygame.mixer.Sound:
        return pygame.mixer.Sound(path)

    def play(self, handle: pygame.mixer.Sound) -> None:
        handle.play()

    def stop(self, handle: pygame.mixer.Sound) -> None:
        handle.stop()
