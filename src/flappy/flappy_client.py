"""
flappy_client.py

Pygame front end: window, input mapping, and rendering of simulation snapshots.
"""

import logging
import math
from typing import Optional

import pygame

from .audio import AudioManager
from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, GROUND_HEIGHT, GROUND_Y, BIRD_X, BIRD_RADIUS,
    PIPE_WIDTH, RENDER_FPS
)
from .data_models import Bird, FrameSnapshot, GameState, Pipe
from .frame_driver import FrameDriver
from .game import GameController
from .physics_engine import SimulationEngine
from .scores import ScoreBridge
from .storage import open_storage

logger = logging.getLogger(__name__)

SKY_TOP = (135, 206, 235)
SKY_BOTTOM = (224, 246, 255)
GROUND_COLOR = (222, 184, 135)
GRASS_COLOR = (34, 139, 34)
GROUND_STRIPE = (196, 165, 116)
PIPE_COLOR = (34, 139, 34)
PIPE_CAP_COLOR = (46, 139, 46)
BIRD_BODY = (255, 215, 0)
BIRD_WING = (255, 165, 0)
BIRD_BEAK = (255, 99, 71)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)

CAP_HEIGHT = 25
CAP_OVERHANG = 5
GROUND_TILE = 40

FLAP_KEYS = (pygame.K_SPACE, pygame.K_UP)


class FlappyClient:
    def __init__(self, db_file: str, fps: int = RENDER_FPS, mute: bool = False):
        pygame.mixer.pre_init(22050, -16, 1, 512)
        pygame.init()
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.SCALED)
        pygame.display.set_caption("Flappy Bird")

        self.db = open_storage(db_file)
        self.audio = AudioManager(self.db, muted=True if mute else None)
        self.audio.load()

        # --- Game Logic ---
        engine = SimulationEngine(scores=ScoreBridge(self.db), audio=self.audio)
        self.game = GameController(engine)
        self.snapshot: FrameSnapshot = self.game.snapshot()

        # Time Management
        self.clock = pygame.time.Clock()
        self.fps = fps
        self.driver = FrameDriver(
            self._frame, wait=lambda: self.clock.tick(self.fps), clock=pygame.time.get_ticks)

        self.large_font = pygame.font.Font(None, 56)
        self.font = pygame.font.Font(None, 28)
        self.small_font = pygame.font.Font(None, 22)
        self.background = self._create_background()

    def run(self):
        """The main client execution loop."""
        logger.info("Starting at %d FPS, best score %d", self.fps, self.snapshot.best)
        try:
            self.driver.run()
        finally:
            self.close()

    def stop(self):
        self.driver.stop()

    def close(self):
        self.driver.stop()
        if self.db is not None:
            self.db.close()
        pygame.quit()

    def _frame(self, now: float):
        self._handle_events()
        if not self.driver.running.is_set():
            return
        self.snapshot = self.game.tick(now)
        self._draw_game(self.snapshot)

    def _handle_events(self):
        """Collapses every flap-like device event into one logical flap."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.stop()
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.stop()
                elif event.key in FLAP_KEYS:
                    self.game.on_flap()
                elif event.key == pygame.K_m:
                    muted = self.audio.toggle_mute()
                    logger.info("Sound %s", "muted" if muted else "on")
            elif event.type in (pygame.MOUSEBUTTONDOWN, pygame.FINGERDOWN):
                self.game.on_flap()

    # ----------------- Rendering -----------------

    def _create_background(self) -> pygame.Surface:
        surface = pygame.Surface((SCREEN_WIDTH, GROUND_Y))
        for y in range(GROUND_Y):
            t = y / GROUND_Y
            color = tuple(int(a + (b - a) * t) for a, b in zip(SKY_TOP, SKY_BOTTOM))
            pygame.draw.line(surface, color, (0, y), (SCREEN_WIDTH, y))

        for x, y, size in ((50, 100, 25), (250, 60, 20), (350, 120, 22)):
            cloud = (255, 255, 255)
            pygame.draw.circle(surface, cloud, (x, y), size)
            pygame.draw.circle(surface, cloud, (int(x + size), int(y - size * 0.3)), int(size * 0.8))
            pygame.draw.circle(surface, cloud, (int(x + size * 1.8), y), int(size * 0.9))
        return surface

    def _draw_pipe(self, pipe: Pipe):
        screen = self.screen
        gap_top = pipe.gap_top
        gap_bottom = pipe.gap_bottom

        pygame.draw.rect(screen, PIPE_COLOR, (pipe.x, 0, PIPE_WIDTH, gap_top - CAP_HEIGHT))
        pygame.draw.rect(screen, PIPE_CAP_COLOR, (
            pipe.x - CAP_OVERHANG, gap_top - CAP_HEIGHT, PIPE_WIDTH + CAP_OVERHANG * 2, CAP_HEIGHT))

        bottom_height = GROUND_Y - gap_bottom - CAP_HEIGHT
        pygame.draw.rect(screen, PIPE_COLOR, (pipe.x, gap_bottom + CAP_HEIGHT, PIPE_WIDTH, bottom_height))
        pygame.draw.rect(screen, PIPE_CAP_COLOR, (
            pipe.x - CAP_OVERHANG, gap_bottom, PIPE_WIDTH + CAP_OVERHANG * 2, CAP_HEIGHT))

    def _draw_bird(self, bird: Bird):
        size = BIRD_RADIUS * 4
        sprite = pygame.Surface((size, size), pygame.SRCALPHA)
        c = size // 2
        r = BIRD_RADIUS

        pygame.draw.ellipse(sprite, BIRD_BODY, (c - r, c - r * 0.85, r * 2, r * 1.7))
        pygame.draw.ellipse(sprite, BIRD_WING, (c - 3 - r * 0.5, c + 3 - r * 0.35, r, r * 0.7))
        pygame.draw.circle(sprite, WHITE, (c + 6, c - 4), 6)
        pygame.draw.circle(sprite, BLACK, (c + 7, c - 4), 3)
        pygame.draw.polygon(sprite, BIRD_BEAK, [
            (c + r - 2, c - 2), (c + r + 10, c + 2), (c + r - 2, c + 6)])

        # Positive rotation tilts the beak down; pygame rotates counter-clockwise
        rotated = pygame.transform.rotate(sprite, -math.degrees(bird.rotation))
        self.screen.blit(rotated, rotated.get_rect(center=(BIRD_X, int(bird.y))))

    def _draw_ground(self, offset: float):
        screen = self.screen
        pygame.draw.rect(screen, GRASS_COLOR, (0, GROUND_Y, SCREEN_WIDTH, 15))
        pygame.draw.rect(screen, GROUND_COLOR, (0, GROUND_Y + 15, SCREEN_WIDTH, GROUND_HEIGHT - 15))

        x = -(offset % GROUND_TILE)
        while x < SCREEN_WIDTH + GROUND_TILE:
            pygame.draw.line(screen, GROUND_STRIPE, (x, GROUND_Y + 30), (x + 20, GROUND_Y + 50), 2)
            x += GROUND_TILE

    def _outlined(self, font: pygame.font.Font, text: str, center: tuple):
        for dx, dy in ((-2, 0), (2, 0), (0, -2), (0, 2)):
            shadow = font.render(text, True, BLACK)
            self.screen.blit(shadow, shadow.get_rect(center=(center[0] + dx, center[1] + dy)))
        surf = font.render(text, True, WHITE)
        self.screen.blit(surf, surf.get_rect(center=center))

    def _draw_game_over(self, snap: FrameSnapshot):
        overlay = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 128))
        self.screen.blit(overlay, (0, 0))

        panel = pygame.Rect(SCREEN_WIDTH // 2 - 120, SCREEN_HEIGHT // 2 - 100, 240, 200)
        pygame.draw.rect(self.screen, GROUND_COLOR, panel)
        pygame.draw.rect(self.screen, (139, 69, 19), panel, 4)

        lines = (
            (self.font, "Game Over", (139, 0, 0), 35),
            (self.font, f"Score: {snap.score}", BLACK, 85),
            (self.font, f"Best: {snap.best}", BLACK, 115),
            (self.small_font, "Tap or Press Space to Retry", BLACK, 165),
        )
        for font, text, color, dy in lines:
            surf = font.render(text, True, color)
            self.screen.blit(surf, surf.get_rect(center=(SCREEN_WIDTH // 2, panel.y + dy)))

    def _draw_game(self, snap: FrameSnapshot):
        """Renders one snapshot."""
        screen = self.screen
        screen.blit(self.background, (0, 0))

        if snap.state is GameState.READY:
            self._outlined(self.large_font, "Flappy Bird", (SCREEN_WIDTH // 2, 150))
            self._outlined(self.font, "Tap or Press Space to Start",
                           (SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2 + 50))
            self._draw_bird(Bird(y=SCREEN_HEIGHT / 2 - 30))
        else:
            for pipe in snap.pipes:
                self._draw_pipe(pipe)
            self._draw_bird(snap.bird)
            if snap.state is GameState.GAME_OVER:
                self._draw_game_over(snap)
            else:
                self._outlined(self.large_font, str(snap.score), (SCREEN_WIDTH // 2, 60))

        # Ground is drawn over the pipes
        self._draw_ground(snap.ground_offset)

        mute_text = self.small_font.render("M: sound off" if snap.muted else "M: sound on", True, WHITE)
        screen.blit(mute_text, (SCREEN_WIDTH - mute_text.get_width() - 10, 10))

        pygame.display.flip()


def create_client(db_file: str, fps: int = RENDER_FPS, mute: bool = False) -> Optional[FlappyClient]:
    try:
        return FlappyClient(db_file, fps=fps, mute=mute)
    except pygame.error as e:
        logger.error("Could not open game window: %s", e)
        pygame.quit()
        return None
