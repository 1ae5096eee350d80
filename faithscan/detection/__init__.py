"""Language detection over fixed marker-word and diacritic signatures."""

from faithscan.detection.detector import LanguageDetector
from faithscan.detection.models import DetectedLanguage, DetectionResult

__all__ = ["LanguageDetector", "DetectedLanguage", "DetectionResult"]
