"""Entry point for petleash

Opens the two-joystick window, feeds pointer input through the controller and
redraws the live log until the window is closed.
"""
import argparse
import logging

import pygame

from controller import Controller
from core.config import LeashConfig
from devices.pointer import PointerReader
from output.export import LogExporter
from output.view import LeashView

LOG = logging.getLogger("petleash")


def build_parser():
    parser = argparse.ArgumentParser(description="petleash: two virtual joysticks with a throttled event log")
    parser.add_argument("--profile", help="YAML profile (defaults apply when omitted)")
    parser.add_argument("--hz", type=int, default=None, help="frame rate cap (overrides profile)")
    parser.add_argument("--export-dir", default=None, help="directory for exported logs (overrides profile)")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Logging level (default: INFO)")
    parser.add_argument("--log-format", default="%(levelname)s:%(name)s:%(message)s",
                        help="Logging format string (default: %(levelname)s:%(name)s:%(message)s)")
    parser.add_argument("--debug-modules", nargs="*", default=[],
                        help="Modules to set to DEBUG level (e.g., 'session', 'throttle', 'logstore', 'pointer')")
    return parser


def configure_logging(args):
    logging.basicConfig(level=getattr(logging, args.log_level), format=args.log_format)
    for module in args.debug_modules:
        logging.getLogger(f"petleash.{module}").setLevel(logging.DEBUG)


def load_config(args) -> LeashConfig:
    cfg = LeashConfig.load_profile(args.profile) if args.profile else LeashConfig()
    if args.hz is not None:
        cfg.hz = args.hz
    if args.export_dir is not None:
        cfg.export_directory = args.export_dir
    cfg.validate()
    return cfg


def main(argv=None):
    args = build_parser().parse_args(argv)
    configure_logging(args)
    cfg = load_config(args)

    controller = Controller.from_config(cfg)
    exporter = LogExporter(cfg.export_directory, cfg.export_filename)

    pygame.init()
    try:
        surface = pygame.display.set_mode((cfg.width, cfg.height))
        pygame.display.set_caption("AI Pet Controller")
        view = LeashView(surface, controller, cfg.container_size, cfg.knob_size)
        reader = PointerReader(surface.get_size())
        reader.subscribe(controller.dispatch)
        clock = pygame.time.Clock()

        LOG.info("petleash running, press E to export, Esc to quit")
        running = True
        while running:
            for ev in pygame.event.get():
                if ev.type == pygame.QUIT:
                    running = False
                elif ev.type == pygame.KEYDOWN and ev.key == pygame.K_ESCAPE:
                    running = False
                elif ev.type == pygame.KEYDOWN and ev.key == pygame.K_e:
                    exporter.export(controller)
                elif (ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1
                      and view.hit_export(ev.pos)):
                    exporter.export(controller)
                else:
                    reader.handle(ev)
            controller.tick()
            view.draw()
            clock.tick(cfg.hz)
    except KeyboardInterrupt:
        LOG.info("shutdown requested")
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
