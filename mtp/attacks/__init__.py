from .many_time_pad import MARKER, Recovery, combine, detect_candidates, recover

__all__ = ["MARKER", "Recovery", "combine", "detect_candidates", "recover"]
