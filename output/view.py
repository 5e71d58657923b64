"""pygame rendering of both joysticks, the live log and the export button"""
import logging

import pygame

from core.state import JoystickGeometry, Source
from mapper import format_axis, knob_offset

LOG = logging.getLogger("petleash.view")

BG = (3, 7, 18)
PANEL = (17, 24, 39)
RIM = (55, 65, 81)
KNOB = (34, 211, 238)
KNOB_RIM = (165, 243, 252)
TEXT = (229, 231, 235)
MUTED = (107, 114, 128)
ACCENT = (103, 232, 249)
SOURCE_COLORS = {Source.LEFT: (74, 222, 128), Source.RIGHT: (251, 146, 60)}
LABELS = {Source.LEFT: "Left Control", Source.RIGHT: "Right Control"}

MARGIN = 24
PAD_GAP = 40


class LeashView:
    def __init__(self, surface, controller, container_size=160.0, knob_size=64.0):
        self.surface = surface
        self.controller = controller
        self.container_size = container_size
        self.knob_size = knob_size
        self.font = pygame.font.SysFont("monospace", 16)
        self.title_font = pygame.font.SysFont("sans", 22, bold=True)
        self.export_rect = pygame.Rect(0, 0, 0, 0)
        self.layout()

    def layout(self):
        """Measure the pads and hand their geometry to the controller."""
        width, height = self.surface.get_size()
        size = self.container_size
        x = MARGIN + size / 2
        top = MARGIN + 40
        for i, source in enumerate(Source):
            cy = top + size / 2 + i * (size + PAD_GAP + 50)
            geom = JoystickGeometry(x, cy, size, self.knob_size)
            self.controller.set_geometry(source, geom)
        panel_left = int(MARGIN * 2 + size + 40)
        self.log_rect = pygame.Rect(panel_left, MARGIN, width - panel_left - MARGIN, height - MARGIN * 3 - 48)
        self.export_rect = pygame.Rect(panel_left, self.log_rect.bottom + MARGIN, self.log_rect.width, 48)
        LOG.debug("layout: log=%s export=%s", self.log_rect, self.export_rect)

    def hit_export(self, pos) -> bool:
        return self.controller.can_export and self.export_rect.collidepoint(pos)

    def draw(self):
        self.surface.fill(BG)
        for source in Source:
            self._draw_pad(source)
        self._draw_log()
        self._draw_export()
        pygame.display.flip()

    def _text(self, text, color, pos, font=None):
        self.surface.blit((font or self.font).render(text, True, color), pos)

    def _draw_pad(self, source):
        geom = self.controller.geometry[source]
        if geom is None:
            return
        center = (int(geom.center_x), int(geom.center_y))
        self._text(LABELS[source], ACCENT, (geom.center_x - geom.container_size / 2, geom.center_y - geom.container_size / 2 - 32),
                   self.title_font)
        pygame.draw.circle(self.surface, PANEL, center, int(geom.container_size / 2))
        pygame.draw.circle(self.surface, RIM, center, int(geom.container_size / 2), 4)
        vec = self.controller.vector(source)
        ox, oy = knob_offset(vec, geom.radius)
        knob_center = (int(geom.center_x + ox), int(geom.center_y + oy))
        pygame.draw.circle(self.surface, KNOB, knob_center, int(geom.knob_size / 2))
        pygame.draw.circle(self.surface, KNOB_RIM, knob_center, int(geom.knob_size / 2), 2)
        readout_y = geom.center_y + geom.container_size / 2 + 8
        left = geom.center_x - geom.container_size / 2
        self._text(f"X: {format_axis(vec.x)}", TEXT, (left, readout_y))
        self._text(f"Y: {format_axis(vec.y)}", TEXT, (left, readout_y + 20))

    def _draw_log(self):
        pygame.draw.rect(self.surface, PANEL, self.log_rect, border_radius=8)
        self._text("Live Log", ACCENT, (self.log_rect.x + 12, self.log_rect.y + 10), self.title_font)
        self._text("Latest 10 Events", MUTED, (self.log_rect.right - 180, self.log_rect.y + 14))
        entries = self.controller.logs()
        if not entries:
            self._text("Awaiting joystick movement...", MUTED,
                       (self.log_rect.x + 12, self.log_rect.centery))
            return
        y = self.log_rect.y + 48
        for entry in entries:
            x = self.log_rect.x + 12
            self._text(entry.timestamp, MUTED, (x, y))
            tag = f"[{entry.source.value}]"
            self._text(tag, SOURCE_COLORS[entry.source], (x + 96, y))
            self._text(f"X: {format_axis(entry.vector.x)}, Y: {format_axis(entry.vector.y)}",
                       TEXT, (x + 176, y))
            y += 26

    def _draw_export(self):
        enabled = self.controller.can_export
        color = (8, 145, 178) if enabled else RIM
        pygame.draw.rect(self.surface, color, self.export_rect, border_radius=8)
        label = self.title_font.render("Export Logs", True, TEXT if enabled else MUTED)
        self.surface.blit(label, label.get_rect(center=self.export_rect.center))
