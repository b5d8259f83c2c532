from .error_logger import StructlogErrorLogger
from .status_page_probe import StatusPagePayload, StatusPageProbe

__all__ = ["StatusPageProbe", "StatusPagePayload", "StructlogErrorLogger"]
