"""A small game skeleton: game loop, state machine, action-based input, category logging, settings and a pygame backend."""

__version__ = "0.1.0"