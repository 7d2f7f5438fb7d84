"""protoctl — orchestration scripts for a protocol-schema repository."""

__version__ = "0.1.0"
