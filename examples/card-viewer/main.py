"""Card Viewer - Keyframe card layout animation demo.

Exercises cardframe: transitions between the three stock keyframes, the
grouped-stack to wheel choreography, and group hover/selection.

Controls:
  Right   Animate to the next keyframe
  Left    Animate to the previous keyframe
  1-3     Jump straight to a keyframe
  [ / ]   Shorten / lengthen the transition to the next keyframe
  Mouse   Hover a group on the grouped stack (lifts it)
  Click   Send the hovered group to the wheel
  Esc     Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from cardframe import (
    AdvanceNext,
    AdvancePrevious,
    EngineState,
    FrameContext,
    JumpTo,
    PointerClicked,
    PointerMoved,
    SetTransitionDuration,
    ViewportResized,
    create_engine,
    render_frame,
)
from ui.cards import draw_cards
from ui.constants import BG_COLOR, DURATION_STEP_MS, FPS, SCREEN_H, SCREEN_W, VIEW_H, VIEW_W
from ui.status import draw_sidebar, draw_status_bar

logger = logging.getLogger(__name__)


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Card Viewer - cardframe visual demo")
    p.add_argument("--seed", type=int, default=None, help="Random seed (default: random)")
    p.add_argument("--fps", type=int, default=FPS, help=f"Frame rate cap (default: {FPS})")
    p.add_argument("--log-level", default="INFO",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                   help="Logging level (default: INFO)")
    args = p.parse_args()
    args.fps = max(10, min(240, args.fps))
    return args


class ViewerState:
    """Holds the engine, its input queue and display stats."""

    def __init__(self, seed: int | None) -> None:
        self.engine, self.queue = create_engine(seed=seed, on_complete=self._on_complete)
        self.transitions = 0
        self.drawn = 0
        self.queue.enqueue(ViewportResized(VIEW_W, VIEW_H))

    @property
    def state(self) -> EngineState:
        return self.engine.state

    def _on_complete(self, state: EngineState, ctx: FrameContext, index: int) -> None:
        self.transitions += 1
        logger.info("Arrived at keyframe %d after %d frames", index + 1, ctx.frame_number)

    def next_pair(self) -> tuple[int, int]:
        current = self.state.animation.current
        return current, self.state.store.next_index(current)

    def next_duration(self) -> float:
        store = self.state.store
        return store.durations.get(self.next_pair(), store.last_duration)

    def nudge_duration(self, delta: float) -> None:
        a, b = self.next_pair()
        self.queue.enqueue(SetTransitionDuration(a, b, self.next_duration() + delta))


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
    )

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Card Viewer - cardframe demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    viewer = ViewerState(seed=args.seed)
    logger.info("Engine seed %d", viewer.engine.seed)

    jump_keys = {pygame.K_1: 0, pygame.K_2: 1, pygame.K_3: 2}
    running = True

    while running:
        clock.tick(args.fps)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_RIGHT:
                    viewer.queue.enqueue(AdvanceNext())
                elif event.key == pygame.K_LEFT:
                    viewer.queue.enqueue(AdvancePrevious())
                elif event.key in jump_keys:
                    viewer.queue.enqueue(JumpTo(jump_keys[event.key]))
                elif event.key == pygame.K_LEFTBRACKET:
                    viewer.nudge_duration(-DURATION_STEP_MS)
                elif event.key == pygame.K_RIGHTBRACKET:
                    viewer.nudge_duration(DURATION_STEP_MS)

            elif event.type == pygame.MOUSEMOTION:
                mx, my = event.pos
                if mx < VIEW_W and my < VIEW_H:
                    viewer.queue.enqueue(PointerMoved(mx, my))

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                mx, my = event.pos
                if mx < VIEW_W and my < VIEW_H:
                    viewer.queue.enqueue(PointerClicked())

        # --- Engine ---
        viewer.engine.step(pygame.time.get_ticks())

        # --- Render ---
        state = viewer.state
        frame = render_frame(state)
        screen.fill(BG_COLOR)
        viewer.drawn = draw_cards(screen, frame.cards, frame.camera, VIEW_W, VIEW_H)

        anim = state.animation
        draw_sidebar(
            screen,
            font,
            current=anim.current,
            layout=state.current_keyframe.layout.value,
            target=anim.target if anim.running else None,
            progress=anim.progress(viewer.engine.clock.now),
            next_duration=viewer.next_duration(),
            hovered_group=state.hovered_group,
            hovered_stroke=(
                None if state.hovered_group is None
                else state.current_keyframe.group_stroke(state.hovered_group)
            ),
            selected_group=state.selected_group,
            drawn=viewer.drawn,
            transitions=viewer.transitions,
            seed=viewer.engine.seed,
        )
        draw_status_bar(screen, font)

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
