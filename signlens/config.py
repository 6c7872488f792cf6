"""
Configuration management for the gesture recognition core.
"""
import yaml
from pathlib import Path
from typing import Optional, Dict, Any
from dataclasses import dataclass

from .errors import ConfigError


STABILITY_POLICIES = ("majority", "lock")


@dataclass
class StabilityConfig:
    """Stability filter configuration."""
    policy: str  # "majority" or "lock"
    window_size: int
    majority_threshold: float
    required_frames: int
    lock_duration_ms: int


@dataclass
class ClassifierConfig:
    """Finger state and gesture rule thresholds (normalized units)."""
    thumb_open_threshold: float
    thumb_vertical_margin: float
    pointing_margin: float
    hand_proximity_threshold: float


@dataclass
class CameraConfig:
    """Camera configuration settings."""
    index: int
    width: int
    height: int
    fps: int


@dataclass
class MediaPipeConfig:
    """MediaPipe Hands configuration settings."""
    max_num_hands: int
    model_complexity: int
    min_detection_confidence: float
    min_tracking_confidence: float


@dataclass
class DisplayConfig:
    """Display configuration settings."""
    show_landmarks: bool
    mirror: bool
    window_name: str


@dataclass
class Cfg:
    """Main configuration class."""
    stability: StabilityConfig
    classifier: ClassifierConfig
    camera: CameraConfig
    mediapipe: MediaPipeConfig
    display: DisplayConfig


def load_config(path: Optional[str] = None) -> Cfg:
    """
    Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses the packaged config.default.yaml

    Returns:
        Configuration object with all settings
    """
    if path is None:
        path = Path(__file__).parent / "config.default.yaml"

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r') as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ConfigError(f"Config file is not a mapping: {config_path}")

    try:
        cfg = _dict_to_config(data)
    except KeyError as e:
        raise ConfigError(f"Missing config key {e} in {config_path}") from e

    validate_config(cfg)
    return cfg


def _dict_to_config(data: Dict[str, Any]) -> Cfg:
    """Convert dictionary to configuration object."""
    stability_data = data['stability']
    stability = StabilityConfig(
        policy=str(stability_data['policy']),
        window_size=int(stability_data['window_size']),
        majority_threshold=float(stability_data['majority_threshold']),
        required_frames=int(stability_data['required_frames']),
        lock_duration_ms=int(stability_data['lock_duration_ms'])
    )

    clf_data = data['classifier']
    classifier = ClassifierConfig(
        thumb_open_threshold=float(clf_data['thumb_open_threshold']),
        thumb_vertical_margin=float(clf_data['thumb_vertical_margin']),
        pointing_margin=float(clf_data['pointing_margin']),
        hand_proximity_threshold=float(clf_data['hand_proximity_threshold'])
    )

    camera_data = data['camera']
    camera = CameraConfig(
        index=camera_data['index'],
        width=camera_data['width'],
        height=camera_data['height'],
        fps=camera_data['fps']
    )

    mp_data = data['mediapipe']
    mediapipe = MediaPipeConfig(
        max_num_hands=mp_data['max_num_hands'],
        model_complexity=mp_data['model_complexity'],
        min_detection_confidence=mp_data['min_detection_confidence'],
        min_tracking_confidence=mp_data['min_tracking_confidence']
    )

    display_data = data['display']
    display = DisplayConfig(
        show_landmarks=display_data['show_landmarks'],
        mirror=display_data['mirror'],
        window_name=display_data['window_name']
    )

    return Cfg(
        stability=stability,
        classifier=classifier,
        camera=camera,
        mediapipe=mediapipe,
        display=display
    )


def validate_config(cfg: Cfg) -> None:
    """Raise ConfigError if any tunable is outside its valid range."""
    s = cfg.stability
    if s.policy not in STABILITY_POLICIES:
        raise ConfigError(f"stability.policy must be one of {STABILITY_POLICIES}, got {s.policy!r}")
    if s.window_size < 1:
        raise ConfigError(f"stability.window_size must be >= 1, got {s.window_size}")
    if not 0.0 < s.majority_threshold <= 1.0:
        raise ConfigError(f"stability.majority_threshold must be in (0, 1], got {s.majority_threshold}")
    if s.required_frames < 1:
        raise ConfigError(f"stability.required_frames must be >= 1, got {s.required_frames}")
    if s.lock_duration_ms < 0:
        raise ConfigError(f"stability.lock_duration_ms must be >= 0, got {s.lock_duration_ms}")

    c = cfg.classifier
    for name in ("thumb_open_threshold", "thumb_vertical_margin", "pointing_margin",
                 "hand_proximity_threshold"):
        if getattr(c, name) < 0:
            raise ConfigError(f"classifier.{name} must be >= 0, got {getattr(c, name)}")
