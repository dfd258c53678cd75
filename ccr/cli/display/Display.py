"""Display interface used by the CLI layer."""

from abc import ABC, abstractmethod
from typing import Any


class Display(ABC):
    """Where command messages and structured output go."""

    @abstractmethod
    def status(self, message: str, **kwargs) -> None: ...

    @abstractmethod
    def success(self, message: str, **kwargs) -> None: ...

    @abstractmethod
    def error(self, message: str, **kwargs) -> None:
        """Report a failure; ``details`` may carry a second, dimmed line."""

    @abstractmethod
    def warning(self, message: str, **kwargs) -> None: ...

    @abstractmethod
    def info(self, message: str, **kwargs) -> None: ...

    @abstractmethod
    def json_output(self, data: Any, **kwargs) -> None:
        """Print ``data`` on stdout; ``format`` is ``yaml`` (default) or ``json``."""
