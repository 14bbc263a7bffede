#!/usr/bin/env python3
"""StoneShooter - Standalone Entry Point.

The simulation runs on a loop thread; this main thread pumps pygame input
and draws the latest published frame.

Usage:
    python main.py
    python main.py --seed 42 --no-audio
    python main.py --width 540 --height 960
"""

import argparse
import os
import sys

# Add project root to path for imports
_project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

import pygame

from stonefall.games.input import InputManager
from stonefall.games.input.sources import KeyboardInputSource
from stonefall.logging import close_all_sinks, create_sink, get_logger, register_sink
from games.StoneShooter import config
from games.StoneShooter.game.audio import NullAudioSink, PygameAudioSink
from games.StoneShooter.game_mode import StoneShooterMode
from games.StoneShooter.runner import StoneShooterRunner

log = get_logger('main')


def main():
    """Run StoneShooter standalone."""
    parser = argparse.ArgumentParser(description="StoneShooter - Standalone")

    # Display options
    parser.add_argument('--width', type=int, default=config.SCREEN_WIDTH, help='Screen width')
    parser.add_argument('--height', type=int, default=config.SCREEN_HEIGHT, help='Screen height')
    parser.add_argument('--fullscreen', action='store_true', help='Run fullscreen')
    parser.add_argument('--fps', type=int, default=config.FPS, help='Simulation ticks per second')

    # Game options
    for arg in StoneShooterMode.get_arguments():
        kwargs = {k: v for k, v in arg.items() if k != 'name'}
        parser.add_argument(arg['name'], **kwargs)
    parser.add_argument('--no-audio', action='store_true', help='Disable sound')

    args = parser.parse_args()

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

    pygame.display.set_caption("StoneShooter")

    # Game-over/restart records go to JSONL when STONEFALL_LOGGING_SESSION_ENABLED is set
    register_sink('session', create_sink('session'))

    audio = NullAudioSink() if args.no_audio else PygameAudioSink()

    game = StoneShooterMode(
        width=width,
        height=height,
        skin=args.skin,
        audio=audio,
        lives=args.lives,
        seed=args.seed,
    )

    input_manager = InputManager(KeyboardInputSource())
    runner = StoneShooterRunner(game, input_manager, fps=args.fps)

    print("\n" + "=" * 50)
    print("STONESHOOTER")
    print("=" * 50)
    print("Controls:")
    print("  - LEFT/RIGHT arrows to tilt the ship")
    print("  - SPACE or click to shoot (restarts after game over)")
    print("  - R to restart")
    print("  - P to pause/resume")
    print("  - ESC to quit")
    print("=" * 50 + "\n")

    clock = pygame.time.Clock()
    running = True
    runner.start()

    try:
        while running:
            dt = clock.tick(args.fps) / 1000.0

            # Source consumes fire/restart and re-posts everything else
            input_manager.update(dt)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_p:
                        if runner.is_running:
                            runner.pause()
                        else:
                            runner.resume()

            game.skin.render_frame(runner.latest_snapshot(), screen)
            pygame.display.flip()
    finally:
        runner.stop()
        audio.close()
        close_all_sinks()
        pygame.quit()

    log.info("Exited after %d ticks", game.tick_count)
    return 0


if __name__ == "__main__":
    sys.exit(main())
