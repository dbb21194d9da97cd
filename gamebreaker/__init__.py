"""Game-framework building blocks: math, strings, input state, objects, rooms, INI files and audio bookkeeping."""

__version__ = "0.1.0"