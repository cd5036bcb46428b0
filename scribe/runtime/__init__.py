"""Runtime wiring: settings, logging and dependency construction."""

from .settings import load_settings
from .logging import configure_logging
from .dependencies import build_runtime_deps, build_runtime_deps_from

__all__ = ["build_runtime_deps", "build_runtime_deps_from", "configure_logging", "load_settings"]
