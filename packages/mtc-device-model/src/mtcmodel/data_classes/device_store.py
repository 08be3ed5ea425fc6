import logging
import threading
from pathlib import Path
from typing import Optional

from mtcmodel.config import DeviceModelSettings
from mtcmodel.data_classes.device import Device
from mtcmodel.data_classes.device_layout import DeviceLayout
from mtcmodel.errors import DeviceModelError

module_logger = logging.getLogger(__name__)


class DeviceModelStore:
    """Holds the published DeviceLayout that readers query.

    A reload builds and resolves a complete new layout before swapping it in.
    A published layout is never modified; if a reload fails the previous one
    stays published.
    """

    settings: DeviceModelSettings

    def __init__(self, settings: Optional[DeviceModelSettings] = None) -> None:
        self.settings = DeviceModelSettings() if settings is None else settings
        self._lock = threading.Lock()
        self._layout: Optional[DeviceLayout] = None
        self._generation = 0

    @property
    def published(self) -> bool:
        with self._lock:
            return self._layout is not None

    @property
    def generation(self) -> int:
        with self._lock:
            return self._generation

    @property
    def layout(self) -> DeviceLayout:
        with self._lock:
            layout = self._layout
        if layout is None:
            raise DeviceModelError("No device layout has been published")
        return layout

    def publish(self, layout: DeviceLayout) -> Optional[DeviceLayout]:
        """Swap in a new layout. Returns the one it replaced."""
        with self._lock:
            previous = self._layout
            self._layout = layout
            self._generation += 1
            generation = self._generation
        module_logger.info(
            "Published device layout generation %d with %d device(s)",
            generation,
            len(layout.models),
        )
        return previous

    def reload(self, layout_path: Optional[Path | str] = None) -> DeviceLayout:
        if layout_path is None:
            layout_path = self.settings.layout_path
        try:
            layout = DeviceLayout.load(
                layout_path,
                raise_errors=self.settings.raise_errors,
                strict_references=self.settings.strict_references,
            )
        except Exception:
            module_logger.exception(
                "Reload of %s failed; keeping generation %d",
                layout_path,
                self.generation,
            )
            raise
        self.publish(layout)
        return layout

    def device(self, key: str) -> Optional[Device]:
        return self.layout.device(key)
