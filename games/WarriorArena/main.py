#!/usr/bin/env python3
"""WarriorArena - Standalone Entry Point.

Usage:
    python main.py
    python main.py --seed 42
    python main.py --mute --fullscreen
    python main.py --list-levels
"""

import argparse
import sys
import os

# Add project root to path for imports
_project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

import pygame

from arena.games.input import InputAction, InputManager
from arena.games.input.sources import KeyboardInputSource
from arena.logging import close_all_sinks, create_sink, get_logger, register_sink
from games.WarriorArena.config import SCREEN_WIDTH, SCREEN_HEIGHT, FPS
from games.WarriorArena.game_mode import WarriorArenaMode

log = get_logger('main')


def build_parser() -> argparse.ArgumentParser:
    """CLI parser: display options plus the game's own arguments."""
    parser = argparse.ArgumentParser(description="Warrior Arena - Standalone")

    # Display options
    parser.add_argument('--width', type=int, default=SCREEN_WIDTH, help='Arena width')
    parser.add_argument('--height', type=int, default=SCREEN_HEIGHT, help='Arena height')
    parser.add_argument('--fullscreen', action='store_true', help='Run fullscreen')

    # Game options
    for arg in WarriorArenaMode.get_arguments():
        arg = dict(arg)
        name = arg.pop('name')
        parser.add_argument(name, **arg)

    return parser


def main():
    """Run WarriorArena standalone."""
    args = build_parser().parse_args()

    # Initialize pygame
    pygame.init()
    pygame.font.init()

    # Create display
    if args.fullscreen:
        screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        width, height = screen.get_size()
    else:
        width, height = args.width, args.height
        screen = pygame.display.set_mode((width, height))

    pygame.display.set_caption("Warrior Arena")

    register_sink('session', create_sink('session', session_name='warrior_arena'))

    # Create game
    game = WarriorArenaMode(
        skin=args.skin,
        seed=args.seed,
        mute=args.mute,
        width=width,
        height=height,
        level_group=args.level_group,
        list_levels=args.list_levels,
    )

    keyboard = KeyboardInputSource()
    input_manager = InputManager(keyboard)

    # Game loop
    clock = pygame.time.Clock()
    running = True

    print("\n" + "=" * 50)
    print("WARRIOR ARENA")
    print("=" * 50)
    print("Controls:")
    print("  - Arrows / WASD to move")
    print("  - ENTER or SPACE to start")
    print("  - R to return to the menu after game over")
    print("  - M to toggle sound")
    print("  - ESC to quit")
    print("=" * 50 + "\n")

    while running:
        dt = clock.tick(FPS) / 1000.0

        key_events = []
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
                key_events.append(event)
        keyboard.feed(key_events)

        input_events = input_manager.get_events()
        if any(e.action == InputAction.QUIT and e.pressed for e in input_events):
            running = False

        # Pass input to game
        game.handle_input(input_events)

        # Update game
        game.update(dt)

        # Render
        game.render(screen)
        pygame.display.flip()

    log.info("Exiting with score %d", game.get_score())
    close_all_sinks()
    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
