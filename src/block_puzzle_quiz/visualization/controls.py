"""Translate pygame events into engine input events."""

from __future__ import annotations

from typing import Dict, Optional

import pygame

from block_puzzle_quiz.game.events import (
    ConfirmSelection,
    Direction,
    DragTo,
    InputEvent,
    Nudge,
    Release,
    SelectAt,
    SelectSlot,
)


KEY_TO_DIRECTION: Dict[int, Direction] = {
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
}

KEY_TO_INDEX: Dict[int, int] = {
    pygame.K_1: 0,
    pygame.K_2: 1,
    pygame.K_3: 2,
    pygame.K_4: 3,
    pygame.K_5: 4,
    pygame.K_KP1: 0,
    pygame.K_KP2: 1,
    pygame.K_KP3: 2,
    pygame.K_KP4: 3,
    pygame.K_KP5: 4,
}

CONFIRM_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER)


def translate_event(event: pygame.event.Event) -> Optional[InputEvent]:
    if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        return SelectAt((float(event.pos[0]), float(event.pos[1])))
    if event.type == pygame.MOUSEMOTION:
        return DragTo((float(event.pos[0]), float(event.pos[1])))
    if event.type == pygame.MOUSEBUTTONUP and event.button == 1:
        return Release()
    if event.type == pygame.KEYDOWN:
        if event.key in KEY_TO_INDEX:
            return SelectSlot(KEY_TO_INDEX[event.key])
        if event.key in KEY_TO_DIRECTION:
            return Nudge(KEY_TO_DIRECTION[event.key])
        if event.key in CONFIRM_KEYS:
            return ConfirmSelection()
    return None
