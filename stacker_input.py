
"""Maps pygame events onto the two engine inputs: drop and restart"""
import logging
from typing import Optional
import pygame
from stacker_engine import GameEngine, GameState

logger = logging.getLogger(__name__)

KEY_ACTIONS = {
    pygame.K_RETURN: "drop",
    pygame.K_KP_ENTER: "drop",
    pygame.K_r: "restart",
}


def action_for(e, restart_rect: Optional[pygame.Rect] = None) -> Optional[str]:
    if e.type == pygame.KEYDOWN:
        return KEY_ACTIONS.get(e.key)
    if e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
        if restart_rect is not None and restart_rect.collidepoint(e.pos):
            return "restart"
    return None


def dispatch(engine: GameEngine, e, restart_rect: Optional[pygame.Rect] = None) -> Optional[str]:
    """Apply the event to the engine. Returns the action taken, if any.

    The restart button only exists while the end-of-game overlay is shown,
    so clicks are ignored during play.
    """
    if engine.state is GameState.PLAYING:
        restart_rect = None
    act = action_for(e, restart_rect)
    if act == "drop":
        engine.drop()
    elif act == "restart":
        engine.restart()
    if act: logger.debug("input event %s -> %s", e.type, act)
    return act
