"""Combat tracker: encounter state machine and signed session transfer."""

__version__ = "1.0.0"
