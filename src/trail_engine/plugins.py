"""Observers for TrailEngine output.

A plugin sees the same two streams a callback does: smoothed motion
samples while a trail is drawn, and the single gesture result when the
trail ends. Plugins run after the engine's own callbacks, in the order
they were registered.

Subclass and override:
    class Counter(TrailPlugin):
        name = "counter"

        def on_gesture(self, event):
            print(event.name, event.data["confidence"])

Or attach label handlers to a plain instance:
    plugin = TrailPlugin(name="circles")

    @plugin.handler("circle_clockwise")
    def spin(event):
        ...

Plugin files in a directory are picked up by PluginManager.load_directory().
"""

from __future__ import annotations

import importlib.util
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from types import ModuleType
from typing import Callable, Optional

logger = logging.getLogger("trail_engine.plugins")

EVENT_TYPES = ("motion", "gesture")
WILDCARD = "*"


@dataclass
class PluginEvent:
    type: str  # one of EVENT_TYPES
    name: str  # MotionType label
    data: dict = field(default_factory=dict)
    timestamp: float = 0.0


class TrailPlugin:
    """Base plugin. Every hook is optional.

    The default on_motion/on_gesture route the event to handlers
    registered for its label, then to wildcard handlers. A failing
    handler is logged and skipped.
    """

    name: str = "unnamed"
    version: str = "1.0.0"
    description: str = ""

    def __init__(self, name: Optional[str] = None):
        if name:
            self.name = name
        self._handlers: dict[str, list[Callable[[PluginEvent], None]]] = {}

    def handler(self, label: str = WILDCARD):
        """Decorator registering `fn` for events carrying `label`."""
        def register(fn: Callable[[PluginEvent], None]):
            self._handlers.setdefault(label, []).append(fn)
            return fn
        return register

    def _route(self, event: PluginEvent):
        for fn in self._handlers.get(event.name, []) + self._handlers.get(WILDCARD, []):
            try:
                fn(event)
            except Exception as e:
                logger.error("Plugin %s handler for %s failed: %s", self.name, event.name, e)

    def on_motion(self, event: PluginEvent):
        self._route(event)

    def on_gesture(self, event: PluginEvent):
        self._route(event)

    def on_startup(self, context: dict):
        pass

    def on_shutdown(self):
        pass


def _find_plugin(module: ModuleType) -> Optional[TrailPlugin]:
    """A module-level `plugin` instance, else the first subclass defined there."""
    candidate = getattr(module, "plugin", None)
    if isinstance(candidate, TrailPlugin):
        return candidate

    for value in vars(module).values():
        if (
            isinstance(value, type)
            and issubclass(value, TrailPlugin)
            and value is not TrailPlugin
            and value.__module__ == module.__name__
        ):
            return value()
    return None


class PluginManager:
    """Ordered registry of plugins keyed by name.

    Usage:
        manager = PluginManager()
        manager.load_directory("plugins/")
        engine = TrailEngine(plugins=manager)
        manager.startup({"engine": engine})
        ...
        manager.shutdown()
    """

    def __init__(self):
        self._plugins: dict[str, TrailPlugin] = {}

    def _call(self, plugin: TrailPlugin, hook: str, *args):
        try:
            getattr(plugin, hook)(*args)
        except Exception as e:
            logger.error("Plugin %s %s failed: %s", plugin.name, hook, e)

    def register(self, plugin: TrailPlugin):
        if plugin.name in self._plugins:
            logger.warning("Replacing plugin '%s'", plugin.name)
        self._plugins[plugin.name] = plugin
        logger.info("Registered plugin %s v%s", plugin.name, plugin.version)

    def unregister(self, name: str):
        """Remove a plugin by name, shutting it down. Unknown names are ignored."""
        plugin = self._plugins.pop(name, None)
        if plugin is not None:
            self._call(plugin, "on_shutdown")

    def load_file(self, path: str | Path) -> Optional[TrailPlugin]:
        """Import one plugin file and register what it defines."""
        path = Path(path)
        module_name = f"trail_plugin_{path.stem}"
        spec = importlib.util.spec_from_file_location(module_name, path)
        if spec is None or spec.loader is None:
            return None

        module = importlib.util.module_from_spec(spec)
        sys.modules[module_name] = module
        spec.loader.exec_module(module)

        plugin = _find_plugin(module)
        if plugin is None:
            logger.warning("No TrailPlugin in %s", path.name)
            return None
        self.register(plugin)
        return plugin

    def load_directory(self, path: str | Path) -> int:
        """Load every public .py file in `path`. Returns how many registered.

        A file that fails to import is logged and skipped.
        """
        path = Path(path)
        if not path.is_dir():
            logger.debug("No plugin directory at %s", path)
            return 0

        loaded = 0
        for py_file in sorted(path.glob("*.py")):
            if py_file.name.startswith("_"):
                continue
            try:
                if self.load_file(py_file) is not None:
                    loaded += 1
            except Exception as e:
                logger.error("Could not load plugin %s: %s", py_file.name, e)
        return loaded

    def startup(self, context: dict):
        for plugin in self._plugins.values():
            self._call(plugin, "on_startup", context)

    def shutdown(self):
        for plugin in self._plugins.values():
            self._call(plugin, "on_shutdown")

    def dispatch(self, event_type: str, event: PluginEvent):
        """Deliver `event` to each plugin's on_<event_type> hook.

        Raises:
            ValueError: if `event_type` is not one of EVENT_TYPES.
        """
        if event_type not in EVENT_TYPES:
            raise ValueError(f"Unknown event type: {event_type!r}")
        hook = f"on_{event_type}"
        for plugin in self._plugins.values():
            self._call(plugin, hook, event)

    @property
    def plugins(self) -> dict[str, TrailPlugin]:
        return dict(self._plugins)

    @property
    def plugin_names(self) -> list[str]:
        return list(self._plugins)
