from typing import List, Optional

import pygame

from replacement import SimulationResult

from .draw_helpers import draw_page_cell, draw_panel
from .theme import (
    ACCENT,
    BORDER,
    CELL_H,
    CELL_W,
    EMPTY_CELL,
    FAULT,
    GRID,
    HIT,
    MAX_VISIBLE_STEPS,
    MUTED,
    TEXT,
)
from .utils import page_color, visible_window


# ------------------------------
# Input panel
# ------------------------------
def draw_input_panel(screen, rect, fields, active_idx, algorithm, speed, font, small, error: str = ""):
    draw_panel(screen, rect, "Inputs", font)

    y = rect.y + 52
    for idx, field in enumerate(fields):
        label = small.render(field["label"], True, MUTED)
        screen.blit(label, (rect.x + 16, y))
        box = pygame.Rect(rect.x + 180, y - 4, rect.w - 200, 30)
        pygame.draw.rect(screen, EMPTY_CELL, box, border_radius=8)
        pygame.draw.rect(screen, ACCENT if idx == active_idx else BORDER, box, 2, border_radius=8)
        screen.blit(small.render(field["value"], True, TEXT), (box.x + 8, box.y + 5))
        y += 40

    info = small.render(f"Algorithm: {algorithm}   (F1 to cycle)     Speed: {speed}   (F2 to cycle)", True, TEXT)
    screen.blit(info, (rect.x + 16, y))
    if error:
        screen.blit(small.render(error, True, FAULT), (rect.x + 16, y + 26))


# ------------------------------
# Frame timeline
# ------------------------------
def draw_timeline(screen, rect, result: Optional[SimulationResult], index: int, font, small, tiny):
    draw_panel(screen, rect, "Frame Timeline", font)
    if result is None:
        screen.blit(small.render("(press ENTER to run a simulation)", True, MUTED), (rect.x + 16, rect.y + 56))
        return

    total = len(result.steps)
    width = min(MAX_VISIBLE_STEPS, max(1, (rect.w - 90) // CELL_W))
    start, end = visible_window(index, total, width)
    x0 = rect.x + 70
    y0 = rect.y + 56

    for row in range(result.capacity):
        lbl = tiny.render(f"F{row}", True, MUTED)
        screen.blit(lbl, (rect.x + 20, y0 + CELL_H + row * CELL_H + 12))

    for col, t in enumerate(range(start, end)):
        step = result.steps[t]
        cx = x0 + col * CELL_W

        ref = small.render(str(step.page)[:4], True, TEXT if t <= index else MUTED)
        screen.blit(ref, ref.get_rect(center=(cx + CELL_W // 2, y0 + CELL_H // 2)))

        if t == index:
            col_rect = pygame.Rect(cx - 2, y0 - 4, CELL_W, CELL_H * (result.capacity + 2) + 8)
            pygame.draw.rect(screen, ACCENT, col_rect, 2, border_radius=8)

        for row in range(result.capacity):
            cell = pygame.Rect(cx + 3, y0 + CELL_H + row * CELL_H + 3, CELL_W - 8, CELL_H - 6)
            if t > index or row >= len(step.frames):
                pygame.draw.rect(screen, EMPTY_CELL, cell, border_radius=8)
                pygame.draw.rect(screen, GRID, cell, 1, border_radius=8)
                continue
            page = step.frames[row]
            draw_page_cell(screen, cell, str(page), page_color(str(page)), small, glow=step.page_fault and page == step.page)

        if t <= index:
            marker_y = y0 + CELL_H * (result.capacity + 1) + 6
            mark = "F" if step.page_fault else "H"
            color = FAULT if step.page_fault else HIT
            txt = small.render(mark, True, color)
            screen.blit(txt, txt.get_rect(center=(cx + CELL_W // 2, marker_y + 10)))

    if start > 0:
        screen.blit(tiny.render("<", True, MUTED), (x0 - 16, y0 + 10))
    if end < total:
        screen.blit(tiny.render(">", True, MUTED), (x0 + (end - start) * CELL_W + 4, y0 + 10))


# ------------------------------
# Stats panel
# ------------------------------
def draw_stats_panel(screen, rect, result: Optional[SimulationResult], index: int, playing: bool, font, small):
    draw_panel(screen, rect, "Statistics", font)
    if result is None:
        return

    step = result.steps[index]
    seen = result.steps[: index + 1]
    faults_so_far = sum(1 for s in seen if s.page_fault)
    lines = [
        (f"Algorithm: {result.policy}    Frames: {result.capacity}", TEXT),
        (f"Step {index + 1} / {len(result.steps)}    {'PLAYING' if playing else 'PAUSED'}", MUTED),
        (f"Reference: {step.page}  ->  {'PAGE FAULT' if step.page_fault else 'HIT'}", FAULT if step.page_fault else HIT),
        (f"Evicted: {'-' if step.evicted is None else step.evicted}", TEXT),
        (f"Faults so far: {faults_so_far}", TEXT),
        (f"Total faults: {result.page_faults}    Hits: {result.hits}", TEXT),
        (f"Hit ratio: {result.hit_ratio * 100:.2f}%    Fault ratio: {result.fault_ratio * 100:.2f}%", TEXT),
    ]
    y = rect.y + 50
    for text, color in lines:
        screen.blit(small.render(text, True, color), (rect.x + 16, y))
        y += 26


# ------------------------------
# Trace / status log
# ------------------------------
def draw_log_panel(screen, rect, lines: List[str], font, tiny):
    draw_panel(screen, rect, "Trace", font)
    max_lines = max(1, (rect.h - 56) // (tiny.get_height() + 4))
    y = rect.y + 48
    for line in lines[-max_lines:]:
        screen.blit(tiny.render(line, True, MUTED), (rect.x + 16, y))
        y += tiny.get_height() + 4
