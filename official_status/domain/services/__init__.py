from .indicator_classifier import INDICATOR_STATUS, classify_indicator

__all__ = ["INDICATOR_STATUS", "classify_indicator"]
