"""
Desktop simulator window using pygame.

Paces frames, turns keyboard / mouse / touch input into button events for
the game loop, blits the rendered frame buffer and draws the HUD text.
"""

import pygame
import asyncio
import logging
from dataclasses import dataclass

from ..core.events import EventBus, EventType, Event, button_press_event, button_release_event, tick_event
from ..game.loop import GameLoop
from ..graphics.renderer import SceneRenderer
from ..settings import Settings

logger = logging.getLogger(__name__)


@dataclass
class WindowConfig:
    """Simulator window configuration."""
    title: str = "SKYGATE"
    fullscreen: bool = False
    fps: int = 60

    # Colors
    text_color: tuple[int, int, int] = (0, 0, 0)
    overlay_text_color: tuple[int, int, int] = (255, 255, 255)
    invincible_color: tuple[int, int, int] = (255, 215, 0)

    @classmethod
    def from_settings(cls, settings: Settings) -> "WindowConfig":
        sim = settings.simulator
        return cls(title=sim.title, fullscreen=sim.fullscreen, fps=sim.fps)


class SimulatorWindow:
    """
    Pygame window driving a GameLoop.

    Keyboard Mapping:
        SPACE / RETURN: Flap (restart after game over)
        Left click / touch: Same as SPACE
        D: Toggle debug line
        ESC / Q: Exit simulator
    """

    def __init__(
        self,
        game: GameLoop,
        config: WindowConfig | None = None,
        event_bus: EventBus | None = None
    ) -> None:
        self.game = game
        self.config = config or WindowConfig()
        self.event_bus = event_bus or game.event_bus
        self.renderer = SceneRenderer(game)

        field = game.settings.field
        self.width = field.width
        self.height = field.height

        # Pygame setup
        self._screen: pygame.Surface | None = None
        self._clock: pygame.time.Clock | None = None
        self._running = False
        self._frame_count = 0
        self._show_debug = False
        self._frame = self.renderer.new_frame()

        # Fonts
        self._font: pygame.font.Font | None = None
        self._big_font: pygame.font.Font | None = None

        self.event_bus.subscribe(EventType.BUTTON_PRESS, self.game.handle_input)
        self.event_bus.subscribe(EventType.POOL_OVERFLOW, self._on_pool_overflow)

        logger.info("SimulatorWindow created")

    def _init_pygame(self) -> None:
        """Initialize pygame and create window."""
        pygame.init()
        pygame.display.set_caption(self.config.title)

        flags = pygame.DOUBLEBUF
        if self.config.fullscreen:
            flags |= pygame.FULLSCREEN | pygame.SCALED

        self._screen = pygame.display.set_mode((self.width, self.height), flags)
        self._clock = pygame.time.Clock()

        pygame.font.init()
        self._font = pygame.font.SysFont("Arial", 24)
        self._big_font = pygame.font.SysFont("Arial", 48)

        logger.info(f"Pygame initialized: {self.width}x{self.height}")

    def _handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._running = False

            elif event.type == pygame.KEYDOWN:
                self._handle_keydown(event)

            elif event.type == pygame.KEYUP:
                if event.key in (pygame.K_SPACE, pygame.K_RETURN):
                    self.event_bus.emit(button_release_event(source="keyboard"))

            # Touches also arrive as synthetic mouse clicks
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if not getattr(event, "touch", False):
                    self.event_bus.emit(button_press_event(source="mouse"))

            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                if not getattr(event, "touch", False):
                    self.event_bus.emit(button_release_event(source="mouse"))

            elif event.type == pygame.FINGERDOWN:
                self.event_bus.emit(button_press_event(source="touch"))

            elif event.type == pygame.FINGERUP:
                self.event_bus.emit(button_release_event(source="touch"))

    def _handle_keydown(self, event: pygame.event.Event) -> None:
        """Handle key press."""
        key = event.key

        if key == pygame.K_ESCAPE or key == pygame.K_q:
            self._running = False
        elif key == pygame.K_d:
            self._show_debug = not self._show_debug
        elif key in (pygame.K_SPACE, pygame.K_RETURN):
            self.event_bus.emit(button_press_event(source="keyboard"))

    def _render(self) -> None:
        """Render frame buffer and HUD."""
        if not self._screen:
            return

        self.renderer.render(self._frame)
        surface = pygame.surfarray.make_surface(self._frame.swapaxes(0, 1))
        self._screen.blit(surface, (0, 0))

        self._render_hud()
        if self._show_debug:
            self._render_debug()

        pygame.display.flip()

    def _render_hud(self) -> None:
        if not self._font or not self._big_font:
            return
        state = self.game.state

        lines = [
            f"Score: {state.score}",
            f"High Score: {state.high_score}",
            f"Difficulty: {state.difficulty:.1f}x",
        ]
        y = 10
        for line in lines:
            self._screen.blit(self._font.render(line, True, self.config.text_color), (10, y))
            y += 30

        if state.is_invincible:
            text = self._font.render("INVINCIBLE!", True, self.config.invincible_color)
            self._screen.blit(text, (10, y))

        if state.game_over:
            center = (self.width // 2, self.height // 2)
            title = self._big_font.render("Game Over!", True, self.config.overlay_text_color)
            self._screen.blit(title, title.get_rect(center=center))
            hint = self._font.render(
                "Press Space or Tap to Restart", True, self.config.overlay_text_color
            )
            self._screen.blit(hint, hint.get_rect(center=(center[0], center[1] + 50)))

    def _render_debug(self) -> None:
        fps = self._clock.get_fps() if self._clock else 0.0
        game = self.game
        text = (
            f"FPS {fps:.0f}  frame {game.frame}  "
            f"pipes {game.pipes.active_count}/{game.pipes.size}  "
            f"stars {game.powerups.active_count}/{game.powerups.size}"
        )
        surface = self._font.render(text, True, self.config.text_color)
        self._screen.blit(surface, (10, self.height - 30))

    def _on_pool_overflow(self, event: Event) -> None:
        logger.info(
            f"Consider raising pool size for {event.data['pool']}: "
            f"{event.data['size']} in use, capacity {event.data['capacity']}"
        )

    async def run(self) -> None:
        """Main simulator loop."""
        self._init_pygame()
        self._running = True

        logger.info("Simulator started")

        while self._running:
            self._handle_events()

            now_ms = float(pygame.time.get_ticks())
            self.game.tick(now_ms)
            self.event_bus.emit(tick_event(now_ms, self._frame_count))

            self._render()

            if self._clock:
                self._clock.tick(self.config.fps)

            self._frame_count += 1

            # Yield to other tasks
            await asyncio.sleep(0)

        self.event_bus.emit(Event(EventType.SHUTDOWN, source="simulator"))
        self._cleanup()

    def _cleanup(self) -> None:
        """Clean up pygame resources."""
        self.game.close()
        pygame.quit()
        logger.info("Simulator stopped")

    def stop(self) -> None:
        """Stop the simulator."""
        self._running = False
