from .events import TelemetryCategory, TelemetryEvent, load_event, mutation_event
from .logger import TelemetryLogger

__all__ = ["TelemetryCategory", "TelemetryEvent", "TelemetryLogger", "load_event", "mutation_event"]
