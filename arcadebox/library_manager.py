"""Loading and switching display back ends."""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from pathlib import Path

from .core import ArcadeError, Graphics, TGraphics

GraphicsFactory = Callable[[], Graphics]

LIB_DIR = "./lib/"

LIBRARY_FILES: dict[TGraphics, str] = {
    TGraphics.NCURSES: "arcade_ncurses.so",
    TGraphics.SDL: "arcade_sdl2.so",
    TGraphics.NDK: "arcade_ndk++.so",
    TGraphics.AA: "arcade_aalib.so",
    TGraphics.CACA: "arcade_libcaca.so",
    TGraphics.ALLEGRO: "arcade_allegro5.so",
    TGraphics.X: "arcade_xlib.so",
    TGraphics.GTK: "arcade_gtk+.so",
    TGraphics.SFML: "arcade_sfml.so",
    TGraphics.IRRLICHT: "arcade_irrlicht.so",
    TGraphics.OPENGL: "arcade_opengl.so",
    TGraphics.VULKAN: "arcade_vulkan.so",
    TGraphics.QT: "arcade_qt5.so",
}


def _open_curses() -> Graphics:
    from .curses_display import CursesDisplay

    return CursesDisplay()


def _open_sdl() -> Graphics:
    from .pygame_display import SdlDisplay

    return SdlDisplay()


def _open_sfml() -> Graphics:
    from .pygame_display import SfmlDisplay

    return SfmlDisplay()


DEFAULT_FACTORIES: dict[str, GraphicsFactory] = {
    "arcade_ncurses.so": _open_curses,
    "arcade_sdl2.so": _open_sdl,
    "arcade_sfml.so": _open_sfml,
}


class LibraryManager:
    """Keeps one display back end open and cycles through the known ones."""

    def __init__(self, factories: Mapping[str, GraphicsFactory] | None = None) -> None:
        self._factories = dict(factories if factories is not None else DEFAULT_FACTORIES)
        self._types = {name: kind for kind, name in LIBRARY_FILES.items()}
        self._names = list(LIBRARY_FILES.values())
        self._paths = {name: LIB_DIR + name for name in self._names}
        self._index = 0
        self._current: Graphics | None = None

    @property
    def current_library(self) -> Graphics | None:
        """The open back end, if any."""
        return self._current

    def _open(self, lib_path: str | os.PathLike) -> Graphics:
        self._current = None
        factory = self._factories.get(Path(lib_path).name)
        if factory is None:
            raise ArcadeError(f"Cannot open library: {lib_path}")
        return factory()

    def load_library(self, lib_path: str | os.PathLike) -> None:
        """Open the back end named by lib_path and make it current."""
        name = Path(lib_path).name
        self._current = self._open(lib_path)
        if name not in self._names:
            self._names.append(name)
            self._paths[name] = os.fspath(lib_path)
        self._index = self._names.index(name)

    def _cycle(self, step: int) -> Graphics:
        if not self._names:
            raise ArcadeError("No libraries loaded")
        for _ in self._names:
            self._index = (self._index + step) % len(self._names)
            try:
                self._current = self._open(self._paths[self._names[self._index]])
            except ArcadeError:
                continue
            return self._current
        raise ArcadeError("No valid libraries available")

    def next_library(self) -> Graphics:
        """Open the next back end that can be opened."""
        return self._cycle(1)

    def previous_library(self) -> Graphics:
        """Open the previous back end that can be opened."""
        return self._cycle(-1)

    def current_type(self) -> TGraphics:
        """Kind of the current back end."""
        kind = self._types.get(self._names[self._index])
        if kind is None:
            raise ArcadeError("Library type not found")
        return kind