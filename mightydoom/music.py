"""Looping background music."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

import pygame

SAMPLE_RATE = 22050
LOOP_FOREVER = -1


class MixerBackend(Protocol):
    """The part of a music mixer that :class:`Music` drives."""

    def load(self, path: str) -> None: ...

    def play(self, loops: int) -> None: ...

    def stop(self) -> None: ...

    def unload(self) -> None: ...

    def get_busy(self) -> bool: ...


class _PygameMixer:
    """Streams music through ``pygame.mixer``, initialised on first use."""

    def __init__(self, frequency: int) -> None:
        self._frequency = frequency
        self._ready = False

    def _music(self):
        if not self._ready:
            pygame.mixer.init(frequency=self._frequency)
            self._ready = True
        return pygame.mixer.music

    def load(self, path: str) -> None:
        self._music().load(path)

    def play(self, loops: int) -> None:
        self._music().play(loops=loops)

    def stop(self) -> None:
        if self._ready:
            pygame.mixer.music.stop()

    def unload(self) -> None:
        if self._ready:
            pygame.mixer.music.unload()

    def get_busy(self) -> bool:
        return self._ready and bool(pygame.mixer.music.get_busy())


class Music:
    """One looping music track at a time, read from ``asset_dir``."""

    def __init__(
        self,
        asset_dir: str | Path = ".",
        backend: MixerBackend | None = None,
        frequency: int = SAMPLE_RATE,
    ) -> None:
        self.asset_dir = Path(asset_dir)
        self.backend: MixerBackend = backend if backend is not None else _PygameMixer(frequency)
        self.track: str | None = None

    def load(self, filename: str) -> Path:
        """Open ``filename`` and start playing it on a loop; return its path."""
        path = self.asset_dir / filename
        if not path.is_file():
            raise FileNotFoundError(f"music file not found: {path}")
        if self.track is not None:
            self.stop()
        self.backend.load(str(path))
        self.backend.play(loops=LOOP_FOREVER)
        self.track = filename
        return path

    def play(self) -> bool:
        """Keep the loaded track sounding; return whether a track is loaded."""
        if self.track is None:
            return False
        if not self.backend.get_busy():
            self.backend.play(loops=LOOP_FOREVER)
        return True

    def stop(self) -> None:
        """Stop the track and release it."""
        self.backend.stop()
        self.backend.unload()
        self.track = None