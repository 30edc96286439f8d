"""Draws the simulation into a numpy frame buffer.

Read-only with respect to the game: it looks at the loop's state, pools
and bird and never mutates them.
"""

import math

import numpy as np
from numpy.typing import NDArray

from skygate.game.loop import GameLoop
from skygate.graphics.primitives import (
    Color, draw_circle, draw_line, draw_polygon, draw_rect, draw_star, fill, new_buffer
)

SKY: Color = (78, 192, 202)
TERRAIN: Color = (46, 204, 113)
GRASS: Color = (39, 174, 96)
PIPE: Color = (46, 204, 113)
PIPE_LIP: Color = (39, 174, 96)
STAR: Color = (255, 215, 0)
BIRD_BODY: Color = (220, 60, 50)
BIRD_WING: Color = (170, 35, 30)
BIRD_BEAK: Color = (250, 160, 40)
WHITE: Color = (255, 255, 255)
BLACK: Color = (0, 0, 0)
GLOW: Color = (255, 215, 0)

LIP_HEIGHT = 20
LIP_OVERHANG = 4

# Wing tip offset (relative to body center) per pose
_WING_TIP = {"up": -10.0, "mid": 0.0, "down": 8.0}


class SceneRenderer:
    """Renders one frame of a GameLoop."""

    def __init__(self, game: GameLoop) -> None:
        self.game = game
        field = game.settings.field
        self.width = field.width
        self.height = field.height

    def new_frame(self) -> NDArray[np.uint8]:
        return new_buffer(self.width, self.height)

    def render(self, buffer: NDArray[np.uint8]) -> None:
        """Draw sky, pipes, power-ups, ground and bird."""
        fill(buffer, SKY)
        self._draw_pipes(buffer)
        self._draw_powerups(buffer)
        self._draw_ground(buffer)
        self._draw_bird(buffer)

        if self.game.state.game_over:
            # Dim the scene under the game-over text
            buffer[:] = (buffer.astype(np.uint16) * 3 // 10).astype(np.uint8)

    def _draw_pipes(self, buffer: NDArray[np.uint8]) -> None:
        pipe_w = int(self.game.settings.pipes.width)
        for pipe in self.game.pipes.active:
            x = int(pipe.x)
            top = int(pipe.top_height)
            bottom = int(pipe.bottom_y)
            draw_rect(buffer, x, 0, pipe_w, top, PIPE)
            draw_rect(buffer, x, bottom, pipe_w, self.height - bottom, PIPE)

            lip_x = x - LIP_OVERHANG // 2
            lip_w = pipe_w + LIP_OVERHANG
            draw_rect(buffer, lip_x, top - LIP_HEIGHT, lip_w, LIP_HEIGHT, PIPE_LIP)
            draw_rect(buffer, lip_x, bottom, lip_w, LIP_HEIGHT, PIPE_LIP)

    def _draw_powerups(self, buffer: NDArray[np.uint8]) -> None:
        cfg = self.game.settings.powerups
        for powerup in self.game.powerups.active:
            if powerup.collected:
                continue
            draw_star(buffer, powerup.x, powerup.y, cfg.size / 2, cfg.size / 4, cfg.spikes, STAR)

    def _draw_ground(self, buffer: NDArray[np.uint8]) -> None:
        field = self.game.settings.field
        # Same band the pipe spawn range keeps clear of
        ground_top = int(self.height - field.ground_inset)
        terrain_top = int(self.height - field.terrain_height)
        draw_rect(buffer, 0, ground_top, self.width, terrain_top - ground_top, GRASS)
        draw_rect(buffer, 0, terrain_top, self.width, int(field.terrain_height), TERRAIN)

    def _draw_bird(self, buffer: NDArray[np.uint8]) -> None:
        bird = self.game.bird
        cx, cy = bird.x, bird.y
        angle = bird.tilt
        cos_a, sin_a = math.cos(angle), math.sin(angle)

        def rotate(dx: float, dy: float) -> tuple[float, float]:
            return (cx + dx * cos_a - dy * sin_a, cy + dx * sin_a + dy * cos_a)

        if self.game.state.is_invincible:
            glow_r = int(max(bird.width, bird.height) / 2 + 6)
            draw_circle(buffer, int(cx), int(cy), glow_r, GLOW, filled=False, thickness=3)

        rx, ry = bird.width / 2, bird.height / 2
        body = [
            rotate(rx * math.cos(t), ry * math.sin(t))
            for t in (i * 2 * math.pi / 24 for i in range(24))
        ]
        draw_polygon(buffer, body, BIRD_BODY)

        tip = _WING_TIP[bird.wing_pose]
        wing = [rotate(-rx * 0.6, 0.0), rotate(0.0, 0.0), rotate(-rx * 0.4, tip)]
        draw_polygon(buffer, wing, BIRD_WING)

        beak = [rotate(rx * 0.8, -2.0), rotate(rx + 6, 1.0), rotate(rx * 0.8, 4.0)]
        draw_polygon(buffer, beak, BIRD_BEAK)
        mouth_x1, mouth_y1 = rotate(rx * 0.8, 1.0)
        mouth_x2, mouth_y2 = rotate(rx + 4, 1.0)
        draw_line(buffer, int(mouth_x1), int(mouth_y1), int(mouth_x2), int(mouth_y2), BIRD_WING)

        eye_x, eye_y = rotate(rx * 0.45, -ry * 0.35)
        draw_circle(buffer, int(eye_x), int(eye_y), 4, WHITE)
        draw_circle(buffer, int(eye_x + 1), int(eye_y), 2, BLACK)
