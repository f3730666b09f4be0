"""
Desktop front-end using pygame.

Shows every wheel of the board side by side with a fixed pointer at 12
o'clock, the item list of the active wheel with an entry line, the
scoreboard and the countdown timer. Wheels are drawn by RasterRenderTarget;
this window only blits the resulting buffers.
"""

import asyncio
import logging
import time
from dataclasses import dataclass
from pathlib import Path

import pygame

from ..app import Board
from ..config import Settings
from ..core.events import (
    Event,
    EventType,
    add_item_request,
    edit_item_request,
    remove_item_request,
    spin_request,
)
from ..render import RasterRenderTarget, SvgRenderTarget
from ..text import PillowTextMeasurer
from ..wheel import Wheel, render_wheel

logger = logging.getLogger(__name__)


@dataclass
class WindowConfig:
    """Simulator window configuration."""
    width: int = 1280
    height: int = 720
    title: str = "wheelspin"
    fullscreen: bool = False
    fps: int = 60
    wheel_pixels: int = 400

    # Colors
    bg_color: tuple[int, int, int] = (20, 20, 30)
    panel_color: tuple[int, int, int] = (40, 40, 50)
    text_color: tuple[int, int, int] = (200, 200, 220)
    accent_color: tuple[int, int, int] = (100, 150, 255)
    pointer_color: tuple[int, int, int] = (255, 255, 255)

    @classmethod
    def from_settings(cls, settings: Settings) -> "WindowConfig":
        sim = settings.simulator
        return cls(
            width=sim.window_width,
            height=sim.window_height,
            fullscreen=sim.fullscreen,
            fps=sim.fps,
            wheel_pixels=sim.wheel_pixels,
        )


class SimulatorWindow:
    """
    Main window.

    Keyboard Mapping:
        SPACE: Spin the active wheel (when the entry line is empty)
        TAB: Switch active wheel
        Typing: Edit the entry line
        RETURN: Add the entry line as an item
        CTRL+E: Replace the selected item's text with the entry line
        UP/DOWN: Select item
        DELETE: Remove selected item
        F1-F4: Team score +1 (with SHIFT: -1)
        F5: Start/stop timer, F6: +1 minute, F7: Reset timer
        F12: Export the active wheel as SVG
        ESC: Exit
    """

    def __init__(self, board: Board, config: WindowConfig | None = None) -> None:
        self.board = board
        self.config = config or WindowConfig.from_settings(board.settings)
        self.event_bus = board.event_bus

        self._screen: pygame.Surface | None = None
        self._clock: pygame.time.Clock | None = None
        self._running = False
        self._frame_count = 0

        self._names = list(board.stores)
        self._active = 0
        self._selected = 0
        self._entry = ""

        # One raster target per wheel, sharing the measurer used for wrapping
        self._fonts = PillowTextMeasurer()
        self._targets = {
            name: RasterRenderTarget(size=board.settings.wheel.size, fonts=self._fonts, background=self.config.bg_color)
            for name in self._names
        }

        self._font: pygame.font.Font | None = None
        self._small_font: pygame.font.Font | None = None

        for name, store in board.stores.items():
            store.set_render_callback(lambda wheel, name=name: self._draw_wheel(name, wheel))
            self._draw_wheel(name, store.wheel)

        self.event_bus.subscribe(EventType.SPIN_COMPLETE, self._on_spin_complete)

        logger.info("SimulatorWindow created")

    @property
    def active_name(self) -> str:
        return self._names[self._active]

    def _init_pygame(self) -> None:
        """Initialize pygame and create window."""
        pygame.init()
        pygame.display.set_caption(self.config.title)

        flags = pygame.DOUBLEBUF
        if self.config.fullscreen:
            flags |= pygame.FULLSCREEN

        self._screen = pygame.display.set_mode((self.config.width, self.config.height), flags)
        self._clock = pygame.time.Clock()

        pygame.font.init()
        self._font = pygame.font.SysFont("DejaVu Sans", 18, bold=True)
        self._small_font = pygame.font.SysFont("DejaVu Sans", 14)
        pygame.key.start_text_input()

        logger.info(f"Pygame initialized: {self.config.width}x{self.config.height}")

    def _draw_wheel(self, name: str, wheel: Wheel) -> None:
        """Render port: redraw a wheel's sectors after its items change."""
        commands = render_wheel(wheel, self._fonts, self.board.settings.wheel)
        self._targets[name].draw(commands)

    def _on_spin_complete(self, event: Event) -> None:
        logger.info(f"[{event.source}] result: {event.data.get('result')!r}")

    # Input

    def _handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._running = False
            elif event.type == pygame.KEYDOWN:
                self._handle_keydown(event)
            elif event.type == pygame.TEXTINPUT:
                # A leading space is the spin key, not text
                if event.text == " " and not self._entry:
                    continue
                self._entry += event.text

    def _handle_keydown(self, event: pygame.event.Event) -> None:
        key = event.key
        shift = bool(event.mod & pygame.KMOD_SHIFT)
        ctrl = bool(event.mod & pygame.KMOD_CTRL)
        store = self.board.stores[self.active_name]
        now_ms = time.monotonic() * 1000

        if key == pygame.K_ESCAPE:
            self._running = False
        elif key == pygame.K_TAB:
            self._active = (self._active + 1) % len(self._names)
            self._selected = 0
        elif key == pygame.K_SPACE and not self._entry:
            self.event_bus.queue_event(spin_request(self.active_name))
        elif key == pygame.K_RETURN:
            self.event_bus.queue_event(add_item_request(self.active_name, self._entry))
            self._entry = ""
        elif key == pygame.K_BACKSPACE:
            self._entry = self._entry[:-1]
        elif key == pygame.K_e and ctrl and self._entry:
            self.event_bus.queue_event(edit_item_request(self.active_name, self._selected, self._entry))
            self._entry = ""
        elif key == pygame.K_DELETE:
            self.event_bus.queue_event(remove_item_request(self.active_name, self._selected))
        elif key == pygame.K_UP:
            self._selected = max(0, self._selected - 1)
        elif key == pygame.K_DOWN:
            self._selected = min(max(0, len(store.items) - 1), self._selected + 1)
        elif key in (pygame.K_F1, pygame.K_F2, pygame.K_F3, pygame.K_F4):
            self._bump_score(key - pygame.K_F1, shift)
        elif key == pygame.K_F5:
            if self.board.timer.running:
                self.board.timer.stop()
            else:
                self.board.timer.start(now_ms)
        elif key == pygame.K_F6:
            self.board.timer.set_time(self.board.timer.minutes + 1, self.board.timer.seconds)
        elif key == pygame.K_F7:
            self.board.timer.reset()
        elif key == pygame.K_F12:
            self._export_svg()

    def _bump_score(self, slot: int, down: bool) -> None:
        if down:
            self.board.scoreboard.decrement(slot)
        else:
            self.board.scoreboard.increment(slot)

    def _export_svg(self) -> None:
        store = self.board.stores[self.active_name]
        target = SvgRenderTarget(self.board.settings.wheel.size, self.board.settings.wheel.size)
        target.draw(render_wheel(store.wheel, self._fonts, self.board.settings.wheel))
        target.set_rotation(store.wheel.rotation)
        path = Path.cwd() / f"wheel_{self.active_name}.svg"
        path.write_text(target.to_svg(), encoding="utf-8")
        logger.info(f"Exported {path}")

    # Drawing

    def _render(self) -> None:
        if not self._screen:
            return

        self._screen.fill(self.config.bg_color)
        size = self.config.wheel_pixels
        margin = 40

        for i, name in enumerate(self._names):
            x = margin + i * (size + margin)
            self._render_wheel(name, x, 60, size, active=(i == self._active))

        self._render_item_panel(margin + len(self._names) * (size + margin), 60)
        self._render_scores(margin, 60 + size + 70)

        pygame.display.flip()

    def _render_wheel(self, name: str, x: int, y: int, size: int, active: bool) -> None:
        store = self.board.stores[name]
        target = self._targets[name]
        target.set_rotation(store.wheel.rotation)

        buffer = target.get_buffer()
        surface = pygame.surfarray.make_surface(buffer.swapaxes(0, 1))
        surface = pygame.transform.smoothscale(surface, (size, size))
        self._screen.blit(surface, (x, y))

        if active:
            pygame.draw.circle(self._screen, self.config.accent_color, (x + size // 2, y + size // 2), size // 2 + 4, 3)

        # Fixed pointer at 12 o'clock
        cx = x + size // 2
        pygame.draw.polygon(self._screen, self.config.pointer_color, [(cx - 14, y - 22), (cx + 14, y - 22), (cx, y + 6)])

        if self._font:
            caption = store.wheel.result or ("..." if store.wheel.spinning else name)
            text = self._font.render(caption, True, self.config.text_color)
            self._screen.blit(text, text.get_rect(center=(cx, y + size + 24)))

    def _render_item_panel(self, x: int, y: int) -> None:
        if not self._small_font or not self._font:
            return

        store = self.board.stores[self.active_name]
        width = self.config.width - x - 20
        rect = pygame.Rect(x, y, width, self.config.wheel_pixels)
        pygame.draw.rect(self._screen, self.config.panel_color, rect, border_radius=8)

        line_y = y + 10
        for i, item in enumerate(store.items):
            color = self.config.accent_color if i == self._selected else self.config.text_color
            pygame.draw.rect(self._screen, item.color, (x + 10, line_y + 3, 12, 12))
            text = self._small_font.render(item.text, True, color)
            self._screen.blit(text, (x + 30, line_y))
            line_y += 20
            if line_y > rect.bottom - 50:
                break

        entry = self._entry or store.placeholder
        entry_color = self.config.text_color if self._entry else (120, 120, 140)
        text = self._font.render(f"> {entry}", True, entry_color)
        self._screen.blit(text, (x + 10, rect.bottom - 32))

    def _render_scores(self, x: int, y: int) -> None:
        if not self._font:
            return

        for i, slot in enumerate(self.board.scoreboard.slots):
            label = f"{slot.team or f'Team {i + 1}'}: {slot.score}"
            text = self._font.render(label, True, self.config.text_color)
            self._screen.blit(text, (x + i * 200, y))

        timer = self.board.timer
        color = self.config.accent_color if timer.running else self.config.text_color
        text = self._font.render(f"Timer {timer.display()}", True, color)
        self._screen.blit(text, (x + 4 * 200, y))

    # Loop

    def _clamp_selection(self) -> None:
        # Removals are applied when the queue drains
        count = len(self.board.stores[self.active_name].items)
        self._selected = min(self._selected, max(0, count - 1))

    async def run(self) -> None:
        """Main loop."""
        self._init_pygame()
        self._running = True

        logger.info("Simulator started")

        while self._running:
            self._handle_events()

            await self.event_bus.process_queue()
            self._clamp_selection()
            self.board.update(time.monotonic() * 1000, self._frame_count)

            self._render()

            if self._clock:
                self._clock.tick(self.config.fps)
            self._frame_count += 1

            await asyncio.sleep(0)

        self._cleanup()

    def _cleanup(self) -> None:
        self.event_bus.emit(Event(EventType.SHUTDOWN, source="simulator"))
        pygame.quit()
        logger.info("Simulator stopped")
