"""
Version command - displays ifupdown version information
"""

from ifupdown.version import IFUPDOWN_VERSION


def run_version(verbose: bool = False) -> None:
    """
    Display ifupdown version information.

    Args:
        verbose: If True, show the release date as well
    """
    if verbose:
        print(f"ifupdown version {IFUPDOWN_VERSION.full_version()}")
    else:
        print(f"ifupdown {IFUPDOWN_VERSION}")
