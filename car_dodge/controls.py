from enum import Enum

import pygame

from car_dodge.game_state import Direction


class Command(Enum):
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    RESTART = "restart"


KEY_COMMANDS = {
    pygame.K_LEFT: Command.MOVE_LEFT,
    pygame.K_a: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT,
    pygame.K_d: Command.MOVE_RIGHT,
    pygame.K_RETURN: Command.RESTART,
    pygame.K_KP_ENTER: Command.RESTART,
}


def command_for_event(event):
    if event.type != pygame.KEYDOWN:
        return None
    return KEY_COMMANDS.get(event.key)


def dispatch(state, command):
    if command is Command.MOVE_LEFT:
        state.move_player(Direction.LEFT)
    elif command is Command.MOVE_RIGHT:
        state.move_player(Direction.RIGHT)
    elif command is Command.RESTART:
        state.restart()


def poll(state, events):
    """Dispatch every key command in ``events``. Returns True if the player asked to quit."""
    quit_requested = False
    for event in events:
        if event.type == pygame.QUIT:
            quit_requested = True
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            quit_requested = True
        else:
            command = command_for_event(event)
            if command is not None:
                dispatch(state, command)
    return quit_requested
