from typing import List, Optional

import pygame

from replacement import SimulationResult, TimelineCursor, run_simulation

from pagesim.playback import Player
from pagesim.serializers import share_message, to_record, trace_lines
from pagesim.storage import export_result, load_last_run, save_last_run

from .draw_helpers import build_background_surface, draw_header_strip
from .panels import draw_input_panel, draw_log_panel, draw_stats_panel, draw_timeline
from .theme import ALGORITHMS, BG, FPS, MUTED, SPEEDS, TEXT, H, W
from .utils import cycle

DEFAULT_REFS = "1 2 3 4 1 2 5 1 2 3 4 5"


def _initial_fields():
    fields = [
        {"label": "Reference string", "value": DEFAULT_REFS},
        {"label": "Frames", "value": "3"},
    ]
    algorithm = "FIFO"
    try:
        saved = load_last_run()
    except ValueError:
        saved = None
    if saved:
        fields[0]["value"] = str(saved.get("referenceString", DEFAULT_REFS))
        fields[1]["value"] = str(saved.get("frameCount", 3))
        if saved.get("algorithm") in ALGORITHMS:
            algorithm = saved["algorithm"]
    return fields, algorithm


def run():
    pygame.init()

    fullscreen = False
    base_size = (W, H)
    window = None
    screen = pygame.Surface(base_size)
    scaled_size = base_size
    offset = (0, 0)

    def _recompute_scale():
        nonlocal scaled_size, offset
        ww, wh = window.get_size()
        scale = min(ww / base_size[0], wh / base_size[1])
        scaled_size = (max(1, int(base_size[0] * scale)), max(1, int(base_size[1] * scale)))
        offset = ((ww - scaled_size[0]) // 2, (wh - scaled_size[1]) // 2)

    def set_display(full: bool):
        nonlocal window, fullscreen
        fullscreen = full
        if fullscreen:
            window = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        else:
            window = pygame.display.set_mode(base_size)
        pygame.display.set_caption("Page Replacement Simulator")
        _recompute_scale()

    def present():
        window.fill(BG)
        if scaled_size == base_size and offset == (0, 0):
            window.blit(screen, (0, 0))
        else:
            window.blit(pygame.transform.smoothscale(screen, scaled_size), offset)
        pygame.display.flip()

    set_display(False)
    screen = screen.convert()
    clock = pygame.time.Clock()

    title_font = pygame.font.SysFont("Arial", 30, bold=True)
    font = pygame.font.SysFont("Arial", 22, bold=True)
    small = pygame.font.SysFont("Arial", 18)
    tiny = pygame.font.SysFont("Arial", 14)
    background = build_background_surface()

    fields, algorithm = _initial_fields()
    active_field = 0
    speed = "NORMAL"
    error_msg = ""
    status_msg = "Edit inputs, ENTER to run"

    result: Optional[SimulationResult] = None
    cursor: Optional[TimelineCursor] = None
    player: Optional[Player] = None
    trace: List[str] = []

    def start_run():
        nonlocal result, cursor, player, trace, error_msg, status_msg
        try:
            new_result = run_simulation(fields[0]["value"], fields[1]["value"], algorithm)
        except ValueError as exc:
            error_msg = str(exc)
            return
        result = new_result
        cursor = TimelineCursor(result)
        player = Player(cursor, speed)
        player.play(pygame.time.get_ticks())
        trace = trace_lines(result)
        error_msg = ""
        try:
            save_last_run(to_record(result, reference_string=fields[0]["value"]))
            status_msg = f"Ran {result.policy}: {result.page_faults} faults"
        except OSError as exc:
            status_msg = f"Ran {result.policy} (not saved: {exc})"

    running = True
    while running:
        clock.tick(FPS)
        now = pygame.time.get_ticks()

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            if event.type == pygame.VIDEORESIZE and not fullscreen:
                _recompute_scale()
            if event.type != pygame.KEYDOWN:
                continue

            if event.key == pygame.K_ESCAPE:
                if fullscreen:
                    set_display(False)
                else:
                    running = False
            elif event.key == pygame.K_F11:
                set_display(not fullscreen)
            elif event.key == pygame.K_TAB:
                active_field = (active_field + 1) % len(fields)
            elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                start_run()
            elif event.key == pygame.K_F1:
                algorithm = cycle(ALGORITHMS, algorithm)
                status_msg = f"Algorithm {algorithm} (ENTER to re-run)"
            elif event.key == pygame.K_F2:
                speed = cycle(SPEEDS, speed)
                if player is not None:
                    player.set_speed(speed)
                status_msg = f"Speed {speed}"
            elif event.key == pygame.K_F3 and player is not None:
                player.toggle(now)
            elif event.key == pygame.K_RIGHT and cursor is not None:
                player.pause()
                cursor.step_forward()
            elif event.key == pygame.K_LEFT and cursor is not None:
                player.pause()
                cursor.step_backward()
            elif event.key == pygame.K_HOME and cursor is not None:
                player.pause()
                cursor.jump_to_start()
            elif event.key == pygame.K_END and cursor is not None:
                player.pause()
                cursor.jump_to_end()
            elif event.key == pygame.K_F5 and result is not None:
                try:
                    path = export_result(to_record(result, reference_string=fields[0]["value"]))
                    status_msg = f"Exported {path}"
                except OSError as exc:
                    status_msg = f"Export failed: {exc}"
            elif event.key == pygame.K_F6 and result is not None:
                trace = share_message(result, fields[0]["value"]).splitlines()
                status_msg = "Share summary shown in trace panel"
            elif event.key == pygame.K_F9 and cursor is not None:
                cursor.reset()
                player.pause()
                trace = trace_lines(result)
                status_msg = "Reset to first step"
            elif event.key == pygame.K_BACKSPACE:
                fields[active_field]["value"] = fields[active_field]["value"][:-1]
            elif event.unicode and event.unicode.isprintable():
                fields[active_field]["value"] += event.unicode

        if player is not None:
            player.tick(now)

        screen.blit(background, (0, 0))
        draw_header_strip(screen, 70)
        screen.blit(title_font.render("Page Replacement Simulator", True, TEXT), (40, 18))
        screen.blit(small.render(status_msg, True, MUTED), (560, 28))

        index = cursor.index if cursor is not None else 0
        playing = player.playing if player is not None else False

        draw_input_panel(screen, pygame.Rect(40, 80, 620, 200), fields, active_field, algorithm, speed, font, small, error_msg)
        draw_stats_panel(screen, pygame.Rect(680, 80, 380, 240), result, index, playing, font, small)

        capacity = result.capacity if result is not None else 3
        timeline_h = min(300, 130 + 40 * capacity)
        draw_timeline(screen, pygame.Rect(40, 340, 1020, timeline_h), result, index, font, small, tiny)

        log_y = 340 + timeline_h + 16
        if trace and cursor is not None and len(trace) == len(result.steps):
            visible = trace[: index + 1]
        else:
            visible = trace
        draw_log_panel(screen, pygame.Rect(40, log_y, 1020, max(80, H - log_y - 30)), visible, font, tiny)

        hint = "TAB field  ENTER run  F3 play/pause  <- -> step  HOME/END jump  F9 reset  F5 export  F6 share  F11 fullscreen"
        screen.blit(tiny.render(hint, True, MUTED), (40, H - 22))

        present()

    pygame.quit()
