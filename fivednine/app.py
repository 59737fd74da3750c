"""The game selection application: assets, games, cards, camera and input."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

import numpy as np

from fivednine import log
from fivednine.config import AppConfig, GameInfo
from fivednine.events import (
    EventPump,
    SelectorEvent,
    SelectorEventType,
    SelectorInputEventType,
)
from fivednine.gamecard import GameCard
from fivednine.log import LogVerbosity, LogZone
from fivednine.render.camera import Camera, ortho
from fivednine.render.shader import ShaderError, ShaderStorage
from fivednine.render.texture import TextureStorage
from fivednine.render.window import EventType, KeyType
from fivednine.selector import CarouselSelector

MAX_GAME_INFO_ENTRIES = 255

_NEAR_PLANE = 0.1
_FAR_PLANE = 1000.0
_GAME_CARD_SHADER = "gamecard"
_GAME_FIELDS = ("title", "alias", "texture_prefix")


class AppError(Exception):
    """Raised when the application cannot be set up."""


def is_texture_asset_path(path) -> bool:
    """Only PNG images are texture assets."""
    return Path(path).suffix == ".png"


def is_shader_asset_path(path) -> bool:
    """Only GLSL sources are shader assets."""
    return Path(path).suffix == ".glsl"


def split_shader_file_name(path) -> tuple[str, str] | None:
    """Split ``<program>_<type>.<ext>`` into (program, type); None if misnamed."""
    stem = Path(path).stem
    index = stem.rfind("_")
    if index < 0:
        log.log(LogZone.DEFAULT, LogVerbosity.WARNING, "Improperly named shader: %s", str(path))
        return None
    return stem[:index], stem[index + 1:]


@dataclass
class _ShaderProgramFiles:
    vertex: str = ""
    fragment: str = ""


def _read_source(path: str) -> str | None:
    if not path:
        return None
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError:
        return None


class FivedNineApp:
    """Loads assets and games, owns the cards and camera, and serves the selector."""

    def __init__(self, texture_storage: TextureStorage | None = None,
                 shader_storage: ShaderStorage | None = None) -> None:
        self._texture_storage = texture_storage if texture_storage is not None else TextureStorage()
        self._shader_storage = shader_storage if shader_storage is not None else ShaderStorage()
        self._camera = Camera()
        self._projection = np.identity(4)
        self._games: list[GameInfo] = []
        self._cards: list[GameCard] = []
        self._selected_index = 0
        self._event_pump = EventPump()
        self._selector: CarouselSelector | None = None
        self._window = None
        self._initialized = False

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    @property
    def camera(self) -> Camera:
        return self._camera

    @property
    def projection_matrix(self) -> np.ndarray:
        return self._projection.copy()

    @property
    def event_pump(self) -> EventPump:
        return self._event_pump

    @property
    def games(self) -> tuple[GameInfo, ...]:
        return tuple(self._games)

    @property
    def cards(self) -> tuple[GameCard, ...]:
        return tuple(self._cards)

    def initialize(self, config: AppConfig, window) -> None:
        """Load everything, lay out the cards and hook up input; raises AppError on failure."""
        log.check(window is not None, "window cannot be None")
        self._window = window

        if config is None:
            log.log_line(LogZone.DEFAULT, LogVerbosity.ERROR, "Configuration has not been parsed.")
            raise AppError("Configuration has not been parsed.")

        self.load_textures(config)
        self.load_shaders(config)
        self.load_games_info(config)

        width, height = window.dimensions()
        self._projection = ortho(0.0, float(width), float(height), 0.0, _NEAR_PLANE, _FAR_PLANE)
        self._camera.set_translation((width / -2.0, height / -2.0, 1.0))

        shader = self._shader_storage.find_shader_by_name(_GAME_CARD_SHADER)
        self._cards = [GameCard(shader) for _ in self._games]

        self._selector = CarouselSelector(self, self._event_pump)
        if not self._selector.initialize():
            log.log_line(LogZone.DEFAULT, LogVerbosity.ERROR, "Failed to initialize selector")
            raise AppError("Failed to initialize selector")

        window.set_key_handler(self.handle_keypress)
        self._initialized = True

    def tick(self, dt_seconds: float) -> None:
        log.check(self._initialized, "Attempting to tick app without having initialized")
        self._selector.tick(dt_seconds)
        self._camera.tick(dt_seconds)

    def draw(self) -> None:
        log.check(self._initialized, "Attempting to draw app without having initialized")
        view = self._camera.view_matrix()
        for card in self._cards:
            card.draw(self._projection, view)

    def load_textures(self, config: AppConfig) -> None:
        """Store every PNG in the textures directory under its file stem."""
        textures_path = Path(config.textures_path)
        if not textures_path.exists():
            log.log_line(LogZone.DEFAULT, LogVerbosity.ERROR,
                         "Textures path does not exist: %s", str(textures_path))
            raise AppError(f"Textures path does not exist: {textures_path}")

        for entry in sorted(textures_path.iterdir()):
            if not (entry.is_file() and is_texture_asset_path(entry)):
                continue
            name = entry.stem
            try:
                self._texture_storage.add_texture_from_image_path(entry, name)
            except (OSError, ValueError):
                log.log_line(LogZone.DEFAULT, LogVerbosity.WARNING,
                             "Failed to add texture from file %s", str(entry))
            else:
                log.log_line(LogZone.DEFAULT, LogVerbosity.INFO,
                             "Successfully added texture %s", name)

    def load_shaders(self, config: AppConfig) -> None:
        """Build a program from each ``<name>_vert.glsl``/``<name>_frag.glsl`` pair."""
        shaders_path = Path(config.shaders_path)
        if not shaders_path.exists():
            log.log_line(LogZone.DEFAULT, LogVerbosity.ERROR,
                         "Shaders path does not exist: %s", str(shaders_path))
            raise AppError(f"Shaders path does not exist: {shaders_path}")

        programs: dict[str, _ShaderProgramFiles] = {}
        for entry in sorted(shaders_path.iterdir()):
            if not (entry.is_file() and is_shader_asset_path(entry)):
                continue
            parts = split_shader_file_name(entry)
            if parts is None:
                continue
            program_name, shader_type = parts
            files = programs.setdefault(program_name, _ShaderProgramFiles())
            if shader_type == "vert":
                files.vertex = str(entry)
            elif shader_type == "frag":
                files.fragment = str(entry)
            else:
                log.log_line(LogZone.DEFAULT, LogVerbosity.WARNING,
                             "Unexpected shader type for file %s", str(entry))

        # Keep going after a failure so every problem gets logged.
        failed = False
        for program_name, files in programs.items():
            vertex_text = _read_source(files.vertex)
            if vertex_text is None:
                log.log_line(LogZone.DEFAULT, LogVerbosity.ERROR,
                             "Failed to open vertex shader %s for shader program %s",
                             files.vertex, program_name)
                failed = True
                continue
            fragment_text = _read_source(files.fragment)
            if fragment_text is None:
                log.log_line(LogZone.DEFAULT, LogVerbosity.ERROR,
                             "Failed to open fragment shader %s for shader program %s",
                             files.fragment, program_name)
                failed = True
                continue
            try:
                self._shader_storage.add_shader(vertex_text, fragment_text, program_name)
            except ShaderError as exc:
                log.log_line(LogZone.DEFAULT, LogVerbosity.ERROR,
                             "Failed to add shader program %s: %s", program_name, str(exc))
                failed = True
            else:
                log.log_line(LogZone.DEFAULT, LogVerbosity.INFO,
                             "Successfully added shader program %s", program_name)

        if failed:
            log.log_line(LogZone.DEFAULT, LogVerbosity.ERROR, "Failed to load one or more shaders.")
            raise AppError("Failed to load one or more shaders.")

    def load_games_info(self, config: AppConfig) -> None:
        """Read the games database; bad entries are skipped unless none are usable."""
        db_path = Path(config.gamesdb_path)
        if not db_path.exists():
            log.log_line(LogZone.DEFAULT, LogVerbosity.ERROR,
                         "Games database configuration path does not exist: %s", str(db_path))
            raise AppError(f"Games database configuration path does not exist: {db_path}")

        try:
            with db_path.open(encoding="utf-8") as stream:
                data = json.load(stream)
        except (OSError, json.JSONDecodeError) as exc:
            raise AppError(f"Failed to read games database {db_path}: {exc}") from exc

        if not isinstance(data, dict) or "games" not in data:
            log.log_line(LogZone.DEFAULT, LogVerbosity.ERROR,
                         "Games database missing required field 'games': %s", str(db_path))
            raise AppError(f"Games database missing required field 'games': {db_path}")

        failed = False
        for entry in data["games"]:
            if len(self._games) >= MAX_GAME_INFO_ENTRIES:
                log.log_line(LogZone.DEFAULT, LogVerbosity.WARNING,
                             "Reached maximum number of supported selectable games. Stopping.")
                return
            values = self._parse_game_entry(entry)
            if values is None:
                failed = True
                continue
            self._games.append(GameInfo(*values))

        if failed:
            if not self._games:
                log.log_line(LogZone.DEFAULT, LogVerbosity.ERROR,
                             "Failed to load any selectable games. Exiting.")
                raise AppError("Failed to load any selectable games.")
            log.log_line(LogZone.DEFAULT, LogVerbosity.WARNING,
                         "Failed to load some selectable games. Continuing initialization.")

    @staticmethod
    def _parse_game_entry(entry) -> list[str] | None:
        fields = entry if isinstance(entry, dict) else {}
        title = fields.get("title")
        values: list[str] = []
        for key in _GAME_FIELDS:
            if key not in fields:
                if key == "title":
                    log.log_line(LogZone.DEFAULT, LogVerbosity.ERROR,
                                 "Game DB entry is missing required field: 'title'")
                else:
                    log.log_line(LogZone.DEFAULT, LogVerbosity.ERROR,
                                 "Game DB entry %s is missing required field: '%s'",
                                 str(title), key)
                return None
            values.append(str(fields[key]))
        return values

    # Selector interface

    def num_cards(self) -> int:
        return len(self._games)

    def select_index(self, index: int) -> None:
        log.check(0 <= index < len(self._games), "Invalid card index: %s", index)
        self._selected_index = index

    def selected_index(self) -> int:
        return self._selected_index

    def confirm_current_selection(self) -> GameInfo | None:
        """The game currently selected, or None when there are no games."""
        return self.card_game_info(self._selected_index)

    def display_dimensions(self) -> tuple[int, int]:
        return self._window.dimensions()

    def _log_out_of_bounds(self, index: int) -> None:
        log.log_line(LogZone.API, LogVerbosity.ERROR, "Game card index out of bounds: %s", index)

    def _card(self, index: int) -> GameCard | None:
        if 0 <= index < len(self._cards):
            return self._cards[index]
        self._log_out_of_bounds(index)
        return None

    def card_game_info(self, index: int) -> GameInfo | None:
        if 0 <= index < len(self._games):
            return self._games[index]
        self._log_out_of_bounds(index)
        return None

    def set_card_appearance_param(self, index: int, name: str, value: float) -> bool:
        card = self._card(index)
        if card is None:
            return False
        card.set_uniform_value(name, value)
        return True

    def card_position(self, index: int) -> np.ndarray | None:
        card = self._card(index)
        return None if card is None else card.position

    def set_card_position(self, index: int, x: float, y: float, z: float) -> bool:
        card = self._card(index)
        if card is None:
            return False
        card.set_position(x, y, z)
        return True

    def set_card_dimensions(self, index: int, width: float, height: float) -> bool:
        card = self._card(index)
        if card is None:
            return False
        card.set_dimensions(width, height)
        return True

    def set_card_texture(self, index: int, name: str) -> bool:
        card = self._card(index)
        if card is None:
            return False
        texture = self._texture_storage.find_texture_by_name(name)
        if texture is None:
            log.log_line(LogZone.API, LogVerbosity.WARNING, "Failed to find texture %s", name)
            return False
        card.texture = texture
        return True

    def set_camera_position(self, position) -> None:
        self._camera.set_translation(position)

    def set_camera_target(self, target) -> None:
        self._camera.set_translation_target(target)

    def handle_keypress(self, event_type: EventType, key_type: KeyType) -> None:
        """Quit on Q; queue previous/next selection on Left/A and Right/D."""
        if event_type is not EventType.KEY_DOWN:
            return
        if key_type is KeyType.Q:
            if self._window is not None:
                self._window.quit()
        elif key_type in (KeyType.LEFT, KeyType.A):
            self._post_input(SelectorInputEventType.PREVIOUS_SELECTION)
        elif key_type in (KeyType.RIGHT, KeyType.D):
            self._post_input(SelectorInputEventType.NEXT_SELECTION)

    def _post_input(self, input_type: SelectorInputEventType) -> None:
        self._event_pump.post_event(SelectorEvent(SelectorEventType.INPUT, input_type))