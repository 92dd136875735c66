"""TrailEngine - Real-time pointer trail motion and gesture recognition."""

__version__ = "0.1.0"

from trail_engine.motion import MotionType
from trail_engine.geometry import Point
from trail_engine.config import TrackerConfig
from trail_engine.trail import TrailBuffer
from trail_engine.classifier import MotionClassifier
from trail_engine.recognizer import GestureRecognizer
from trail_engine.confidence import ConfidenceScorer
from trail_engine.engine import TrailEngine, MotionEvent, GestureResult, PRIMARY_BUTTON
from trail_engine.plugins import TrailPlugin, PluginManager, PluginEvent
