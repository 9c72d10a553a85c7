"""Configuration, history, annotation and geometry support for a PCB layout viewer."""

__version__ = "0.1.0"