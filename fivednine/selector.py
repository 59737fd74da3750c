"""Carousel selector: games laid out in a row, one selected at a time."""

from __future__ import annotations

import numpy as np

from fivednine import log
from fivednine.events import EventPump, SelectorEvent, SelectorEventType, SelectorInputEventType

TINTED = 0.3
UNTINTED = 1.0

_CARD_PADDING_X = 20.0
_CARD_WIDTH = 200
_CARD_HEIGHT = 360
_TEXTURE_SUFFIX = "_600x900"


class CarouselSelector:
    """Lays out the app's cards and moves the selection on input events."""

    def __init__(self, app, event_pump: EventPump) -> None:
        log.check(app is not None, "App cannot be None in carousel selector")
        log.check(event_pump is not None, "Event pump cannot be None in carousel selector")
        self._app = app
        self._event_pump = event_pump

    def initialize(self) -> bool:
        """Place and tint every card, select the middle one and snap the camera to it."""
        num_cards = self._app.num_cards()
        middle = num_cards // 2

        first_x = middle * -1.0 * (_CARD_WIDTH + _CARD_PADDING_X)
        card_y = _CARD_HEIGHT / -2.0
        card_z = 0.0

        for index in range(num_cards):
            card_x = first_x + float(index * (_CARD_WIDTH + _CARD_PADDING_X))
            self._app.set_card_position(index, card_x, card_y, card_z)
            self._app.set_card_dimensions(index, _CARD_WIDTH, _CARD_HEIGHT)
            tint = UNTINTED if index == middle else TINTED
            self._app.set_card_appearance_param(index, "tint", tint)

            game_info = self._app.card_game_info(index)
            if game_info is None:
                continue
            self._app.set_card_texture(index, game_info.texture_prefix + _TEXTURE_SUFFIX)

        self._app.select_index(middle)
        self._snap_camera_to_card(middle)
        return True

    def tick(self, dt_seconds: float) -> None:
        """Handle every queued event."""
        while (event := self._event_pump.get_next_event()) is not None:
            if event.event_type is SelectorEventType.INPUT:
                self._handle_input_event(event)

    def _handle_input_event(self, event: SelectorEvent) -> None:
        current = self._app.selected_index()
        if event.input_event_type is SelectorInputEventType.NEXT_SELECTION:
            if current < self._app.num_cards() - 1:
                self._change_selection(current, current + 1)
        elif event.input_event_type is SelectorInputEventType.PREVIOUS_SELECTION:
            if current > 0:
                self._change_selection(current, current - 1)

    def _change_selection(self, current: int, new: int) -> None:
        self._app.select_index(new)
        self._app.set_card_appearance_param(current, "tint", TINTED)
        self._app.set_card_appearance_param(new, "tint", UNTINTED)
        self._move_camera_to_card(new)

    def _camera_position_for_card(self, index: int):
        position = self._app.card_position(index)
        if position is None:
            return None
        width, height = self._app.display_dimensions()
        position = np.array(position, dtype=float).reshape(3)
        position[0] += _CARD_WIDTH / 2.0 - float(width) / 2.0
        position[1] += _CARD_HEIGHT / 2.0 - float(height) / 2.0
        position[2] = 1.0
        return position

    def _move_camera_to_card(self, index: int) -> None:
        position = self._camera_position_for_card(index)
        if position is not None:
            self._app.set_camera_target(position)

    def _snap_camera_to_card(self, index: int) -> None:
        position = self._camera_position_for_card(index)
        if position is not None:
            self._app.set_camera_position(position)