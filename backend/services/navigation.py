"""
Servicio de navegación - Historial de rutas y redirecciones
"""
from typing import List, Optional, Protocol


class Navigator(Protocol):
    """Anything that can change the active view to a path"""

    def push(self, path: str) -> None:
        ...


class MemoryHistory:
    """Navigation history kept in memory, starts at a single entry"""

    def __init__(self, initial_path: str = "/"):
        self.entries: List[str] = [initial_path]
        self.index = 0

    @property
    def location(self) -> str:
        return self.entries[self.index]

    def push(self, path: str) -> None:
        """Agregar una ruta y descartar las entradas hacia adelante"""
        del self.entries[self.index + 1:]
        self.entries.append(path)
        self.index = len(self.entries) - 1

    def back(self) -> str:
        if self.index > 0:
            self.index -= 1
        return self.location


class RedirectNavigator:
    """Records the pushed path so an HTTP handler can answer with a redirect"""

    def __init__(self):
        self.target: Optional[str] = None

    def push(self, path: str) -> None:
        self.target = path
