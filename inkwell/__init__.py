"""Inkwell blog backend: REST and gRPC APIs over one shared service layer."""

__version__ = "0.1.0"
