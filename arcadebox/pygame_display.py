"""Windowed display back ends drawn with pygame."""

from __future__ import annotations

import sys

import pygame

from .core import ArcadeError, Entity, Graphics, KeyBind

WIDTH = 800
HEIGHT = 600
FONT_PATH = "assets/fonts/upheavtt.ttf"
FONT_SIZE = 24
TEXT_COLOR = (255, 255, 255)
BACKGROUND = (0, 0, 0)

_KEYS = {
    pygame.K_a: KeyBind.A_KEY,
    pygame.K_z: KeyBind.Z_KEY,
    pygame.K_q: KeyBind.Q_KEY,
    pygame.K_s: KeyBind.S_KEY,
    pygame.K_UP: KeyBind.UP_KEY,
    pygame.K_DOWN: KeyBind.DOWN_KEY,
    pygame.K_LEFT: KeyBind.LEFT_KEY,
    pygame.K_RIGHT: KeyBind.RIGHT_KEY,
    pygame.K_SPACE: KeyBind.SPACE,
    pygame.K_RETURN: KeyBind.ENTER,
    pygame.K_ESCAPE: KeyBind.ESC,
}


def is_asset(entity: str) -> bool:
    """Whether an entity names an image file rather than text to write."""
    return entity.startswith("assets/")


def key_from_pygame(keycode: int) -> KeyBind:
    """Map a pygame key code to a KeyBind."""
    return _KEYS.get(keycode, KeyBind.NONE)


def target_size(requested: tuple[int, int], natural: tuple[int, int]) -> tuple[int, int]:
    """Pick the drawn size: each zero dimension takes the natural one."""
    req_w, req_h = requested
    nat_w, nat_h = natural
    return (req_w or nat_w, req_h or nat_h)


class PygameDisplay(Graphics):
    """An 800x600 window that draws sprites and text."""

    strict = False
    scale_text = True
    restart_sound = True
    open_audio_on_init = True
    frame_rate: int | None = None
    font_error = "Failed to initialize components"

    def __init__(self, title: str = "Arcade") -> None:
        self.title = title
        self._screen: pygame.Surface | None = None
        self._font: pygame.font.Font | None = None
        self._sound: pygame.mixer.Sound | None = None
        self._sound_name = ""
        self._channel = None
        self._failed: set[str] = set()
        self._clock: pygame.time.Clock | None = None

    def _require_screen(self) -> pygame.Surface:
        if self._screen is None:
            raise ArcadeError("Window is not initialised")
        return self._screen

    def _require_font(self) -> pygame.font.Font:
        if self._font is None:
            raise ArcadeError("Font is not loaded")
        return self._font

    def _ensure_mixer(self) -> None:
        if pygame.mixer.get_init():
            return
        try:
            pygame.mixer.init(44100, -16, 2, 2048)
        except pygame.error as exc:
            raise ArcadeError("Failed to initialize audio") from exc

    def init(self) -> None:
        try:
            pygame.display.init()
            pygame.font.init()
        except pygame.error as exc:
            raise ArcadeError("Failed to initialize libs") from exc
        if self.open_audio_on_init:
            self._ensure_mixer()
        try:
            self._screen = pygame.display.set_mode((WIDTH, HEIGHT))
            pygame.display.set_caption(self.title)
        except pygame.error as exc:
            raise ArcadeError("Failed to initialize components") from exc
        try:
            self._font = pygame.font.Font(FONT_PATH, FONT_SIZE)
        except (pygame.error, OSError) as exc:
            raise ArcadeError(self.font_error) from exc
        self._clock = pygame.time.Clock() if self.frame_rate else None

    def get_key(self) -> KeyBind:
        while True:
            event = pygame.event.poll()
            if event.type == pygame.NOEVENT:
                return KeyBind.NONE
            if event.type == pygame.QUIT:
                return KeyBind.ESC
            if event.type == pygame.KEYDOWN:
                key = key_from_pygame(event.key)
                if key is not KeyBind.NONE:
                    return key

    def display(self, entities: list[Entity]) -> None:
        self._require_screen()
        for entity in entities:
            if is_asset(entity.text):
                self.render_image(entity)
            else:
                self.render_text(entity)
        pygame.display.flip()
        if self._clock is not None:
            self._clock.tick(self.frame_rate)

    def _fail(self, message: str) -> None:
        if self.strict:
            raise ArcadeError(message)
        print(message, file=sys.stderr)

    def render_image(self, entity: Entity) -> None:
        """Draw the image file an entity names; files that fail are not retried."""
        path = entity.text
        if path in self._failed:
            return
        try:
            image = pygame.image.load(path)
        except (pygame.error, OSError) as exc:
            self._failed.add(path)
            if self.strict:
                raise ArcadeError(f"Failed to load image: {path}") from exc
            print(f"Failed to load image: {path} ({exc})", file=sys.stderr)
            return
        width, height = target_size(entity.size, image.get_size())
        if width <= 0 or height <= 0:
            self._fail(f"Invalid dimensions for image: {path}")
            return
        if (width, height) != image.get_size():
            image = pygame.transform.scale(image, (width, height))
        self._require_screen().blit(image, entity.position)

    def render_text(self, entity: Entity) -> None:
        """Write an entity's text in white."""
        font = self._require_font()
        width, height = target_size(entity.size, font.size(entity.text))
        if width <= 0 or height <= 0:
            self._fail(f"Invalid dimensions for text: {entity.text}")
            return
        surface = font.render(entity.text, True, TEXT_COLOR)
        if self.scale_text and (width, height) != surface.get_size():
            surface = pygame.transform.scale(surface, (width, height))
        self._require_screen().blit(surface, entity.position)

    def play_sound(self, sound: str) -> None:
        if self._sound is None or self._sound_name != sound:
            self._ensure_mixer()
            if self._sound is not None:
                self._sound.stop()
            try:
                self._sound = pygame.mixer.Sound(sound)
            except (pygame.error, OSError) as exc:
                self._sound = None
                self._sound_name = ""
                raise ArcadeError(f"Failed to load sound: {sound}") from exc
            self._sound_name = sound
            self._channel = None
        if self.restart_sound or self._channel is None or not self._channel.get_busy():
            self._channel = self._sound.play(loops=-1)

    def clear(self) -> None:
        self._require_screen().fill(BACKGROUND)

    def nuke(self) -> None:
        if self._sound is not None:
            self._sound.stop()
            self._sound = None
            self._sound_name = ""
        self._channel = None
        if pygame.mixer.get_init():
            pygame.mixer.quit()
        pygame.font.quit()
        pygame.display.quit()
        self._screen = None
        self._font = None
        self._clock = None


class SdlDisplay(PygameDisplay):
    """Window that logs bad images and keeps going, scaling text to size."""

    def __init__(self) -> None:
        super().__init__("Arcade SDL")


class SfmlDisplay(PygameDisplay):
    """Window that raises on bad images, loops one sound and caps the frame rate."""

    strict = True
    scale_text = False
    restart_sound = False
    open_audio_on_init = False
    frame_rate = 60
    font_error = "Failed to load font"

    def __init__(self) -> None:
        super().__init__("Arcade SFML")