from ifupdown.version.ifupdown_version import IFUPDOWN_VERSION, Version

__all__ = ["IFUPDOWN_VERSION", "Version"]
