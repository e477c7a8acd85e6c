import pygame

from .theme import (
    ACCENT,
    BG,
    BORDER,
    HEADER_STRIP_ALPHA,
    HILITE,
    HILITE_ALPHA,
    OUTLINE,
    PANEL,
    SHADOW,
    SHADOW_ALPHA,
    SHADOW_OFFSET,
    TEXT,
    W,
    H,
)


def draw_shadow_rect(screen, rect, radius=14, alpha=SHADOW_ALPHA, offset=SHADOW_OFFSET):
    surf = pygame.Surface((rect.w + 14, rect.h + 14), pygame.SRCALPHA)
    pygame.draw.rect(surf, (*SHADOW, alpha), pygame.Rect(7, 7, rect.w, rect.h), border_radius=radius)
    screen.blit(surf, (rect.x + offset[0] - 7, rect.y + offset[1] - 7))


def draw_inner_highlight(screen, rect, radius=14, alpha=HILITE_ALPHA):
    band = pygame.Surface((rect.w - 6, 26), pygame.SRCALPHA)
    pygame.draw.rect(band, (*HILITE, alpha), band.get_rect(), border_radius=radius)
    screen.blit(band, (rect.x + 3, rect.y + 3))


def build_background_surface():
    """Vertical gradient around BG, rendered once and reused every frame."""
    top = tuple(min(255, c + 7) for c in BG)
    bottom = tuple(max(0, c - 7) for c in BG)

    grad = pygame.Surface((1, H))
    for y in range(H):
        t = y / max(1, H - 1)
        grad.set_at((0, y), tuple(int(a * (1 - t) + b * t) for a, b in zip(top, bottom)))
    return pygame.transform.scale(grad, (W, H))


def draw_header_strip(screen, height):
    strip = pygame.Surface((W, height), pygame.SRCALPHA)
    denom = max(1, height - 1)
    for y in range(height):
        a = int(HEADER_STRIP_ALPHA * (1.0 - y / denom) ** 1.6)
        strip.fill((0, 0, 0, a), rect=pygame.Rect(0, y, W, 1))
    screen.blit(strip, (0, 0))


def draw_panel(screen, rect, title, font):
    draw_shadow_rect(screen, rect)
    pygame.draw.rect(screen, PANEL, rect, border_radius=14)
    draw_inner_highlight(screen, rect)
    pygame.draw.rect(screen, BORDER, rect, 2, border_radius=14)
    if title:
        screen.blit(font.render(title, True, TEXT), (rect.x + 12, rect.y + 10))


def draw_page_cell(screen, rect, label, color, small, glow=False):
    """One frame slot. `glow` marks the page that was just loaded."""
    pygame.draw.rect(screen, color, rect, border_radius=8)
    pygame.draw.rect(screen, OUTLINE, rect, 2, border_radius=8)
    if glow:
        ring = pygame.Surface((rect.w + 8, rect.h + 8), pygame.SRCALPHA)
        pygame.draw.rect(ring, (*ACCENT, 200), ring.get_rect(), width=3, border_radius=10)
        screen.blit(ring, (rect.x - 4, rect.y - 4))
    if label:
        txt = small.render(str(label)[:4], True, (10, 10, 10))
        screen.blit(txt, txt.get_rect(center=rect.center))
