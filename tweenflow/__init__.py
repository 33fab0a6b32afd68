"""Entity-based tweening: an entity world, tween targets, systems that apply
tweens, and timed tween events."""

__version__ = "0.7.0"

__all__ = ["events", "systems", "tween", "world"]