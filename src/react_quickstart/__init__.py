"""react-quickstart - bootstrap a React project in one command."""

__version__ = "0.1.0"
