"""Control messages, device messages, game key maps and frame hand-over for Android screen control."""

__version__ = "0.1.0"