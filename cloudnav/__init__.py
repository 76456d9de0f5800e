"""CloudNav - keyboard-driven terminal browser for cloud resources."""

__version__ = "0.1.0"
