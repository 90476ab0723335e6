"""
burstfx Confetti Demo
Interactive pygame window that fires a confetti burst on every "win".

Controls:
  Space   Win! (trigger a burst)
  S       Toggle serialized bursts (cancel the running one first)
  T       Toggle staggered spawn
  C       Cancel all bursts
  Esc     Quit
"""

import logging
import sys

import pygame

from burstfx import BurstConfig, BurstController, setup_logging
from burstfx_pygame import PygameFrameScheduler, PygameSurface, PygameViewport

# --- Configuration ---
WIDTH, HEIGHT = 1024, 768
FPS = 60
TITLE = "burstfx Confetti"

BG_COLOR = (245, 245, 240)
HUD_COLOR = (60, 60, 80)
STAGGER_MILLIS = 40.0


def main():
    setup_logging(logging.DEBUG if "--debug" in sys.argv else logging.INFO)
    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT), pygame.RESIZABLE)
    pygame.display.set_caption(TITLE)
    pg_clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 14)

    # --- Host setup ---
    surface = PygameSurface(screen)
    scheduler = PygameFrameScheduler()
    controller = BurstController(surface, PygameViewport(screen), scheduler, seed=42)
    config = BurstConfig()

    # --- State ---
    serialized = False
    running = True

    while running:
        pg_clock.tick(FPS)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    if serialized:
                        controller.cancel_all()
                    controller.trigger(config)
                elif event.key == pygame.K_s:
                    serialized = not serialized
                elif event.key == pygame.K_t:
                    stagger = 0.0 if config.spawn_interval_millis else STAGGER_MILLIS
                    config = config.replace(spawn_interval_millis=stagger)
                elif event.key == pygame.K_c:
                    controller.cancel_all()

        # --- Update ---
        scheduler.pump()

        # --- Draw ---
        screen.fill(BG_COLOR)
        drawn = surface.draw()

        # --- HUD ---
        fps_val = pg_clock.get_fps()
        serial_str = "ON" if serialized else "OFF"
        stagger_str = "ON" if config.spawn_interval_millis else "OFF"
        hud_lines = [
            f"Bursts: {len(controller.active)}   Confetti: {drawn}   FPS: {fps_val:.0f}",
            f"Serialized: {serial_str}   Stagger: {stagger_str}   Seed: {controller.seed}",
            "Space=Win  S=Serialize  T=Stagger  C=Cancel  Esc=Quit",
        ]
        for i, line in enumerate(hud_lines):
            surf = font.render(line, True, HUD_COLOR)
            screen.blit(surf, (10, 8 + i * 20))

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
