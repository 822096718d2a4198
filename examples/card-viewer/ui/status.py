"""Info panel (sidebar) and bottom status bar."""
from __future__ import annotations

import pygame

from cardframe import Color, to_hex

from ui.constants import (
    ACTIVE_COLOR,
    BORDER_COLOR,
    LABEL_COLOR,
    SCREEN_W,
    SIDEBAR_BG,
    SIDEBAR_W,
    STATUS_BG,
    STATUS_H,
    TEXT_COLOR,
    TEXT_DIM,
    VIEW_H,
)


def draw_sidebar(
    surface: pygame.Surface,
    font: pygame.font.Font,
    current: int,
    layout: str,
    target: int | None,
    progress: float,
    next_duration: float,
    hovered_group: int | None,
    hovered_stroke: Color | None,
    selected_group: int,
    drawn: int,
    transitions: int,
    seed: int,
) -> None:
    """Draw right-side info panel."""
    x = SCREEN_W - SIDEBAR_W

    pygame.draw.rect(surface, SIDEBAR_BG, (x, 0, SIDEBAR_W, VIEW_H))
    pygame.draw.line(surface, BORDER_COLOR, (x, 0), (x, VIEW_H))

    pad = 10
    line_h = 22
    cx = x + pad
    cy = 8

    surface.blit(font.render("KEYFRAME", True, LABEL_COLOR), (cx, cy))
    cy += line_h + 4
    surface.blit(font.render(f"Slot: {current + 1}", True, TEXT_COLOR), (cx, cy))
    cy += line_h
    surface.blit(font.render(layout, True, TEXT_DIM), (cx, cy))
    cy += line_h + 8

    if target is not None:
        text = f"-> {target + 1}  {progress * 100:3.0f}%"
        surface.blit(font.render(text, True, ACTIVE_COLOR), (cx, cy))
    else:
        surface.blit(font.render("Idle", True, TEXT_DIM), (cx, cy))
    cy += line_h
    surface.blit(font.render(f"Next: {next_duration:.0f}ms", True, TEXT_COLOR), (cx, cy))
    cy += line_h + 8

    hover = "-" if hovered_group is None else str(hovered_group)
    surface.blit(font.render(f"Hover: {hover}", True, TEXT_COLOR), (cx, cy))
    cy += line_h
    if hovered_stroke is not None:
        swatch = tuple(round(c) for c in hovered_stroke)
        pygame.draw.rect(surface, swatch, (cx, cy + 3, 12, 12))
        surface.blit(font.render(to_hex(hovered_stroke), True, TEXT_DIM), (cx + 18, cy))
        cy += line_h
    surface.blit(font.render(f"Wheel: {selected_group}", True, TEXT_COLOR), (cx, cy))
    cy += line_h + 8

    surface.blit(font.render(f"Cards: {drawn}", True, TEXT_COLOR), (cx, cy))
    cy += line_h
    surface.blit(font.render(f"Done: {transitions}", True, TEXT_COLOR), (cx, cy))
    cy += line_h
    surface.blit(font.render(f"Seed: {seed}", True, TEXT_DIM), (cx, cy))


def draw_status_bar(surface: pygame.Surface, font: pygame.font.Font) -> None:
    """Draw bottom key-bindings bar."""
    y = VIEW_H
    pygame.draw.rect(surface, STATUS_BG, (0, y, SCREEN_W, STATUS_H))
    pygame.draw.line(surface, BORDER_COLOR, (0, y), (SCREEN_W, y))

    text = "[<-/->] Prev/Next  [1-3] Jump  [ [ / ] ] Duration  [Click] Wheel  [Esc] Quit"
    label = font.render(text, True, TEXT_DIM)
    surface.blit(label, (8, y + STATUS_H // 2 - label.get_height() // 2))
