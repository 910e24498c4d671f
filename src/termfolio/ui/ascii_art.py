"""ASCII art logos for the home screen."""

DUCK_LOGO = r"""
    _
  >(.)__
   (___/
"""

DEFAULT_LOGO = r"""
  _                       __       _ _
 | |_ ___ _ __ _ __ ___  / _| ___ | (_) ___
 | __/ _ \ '__| '_ ` _ \| |_ / _ \| | |/ _ \
 | ||  __/ |  | | | | | |  _| (_) | | | (_) |
  \__\___|_|  |_| |_| |_|_|  \___/|_|_|\___/
"""

LOGOS = {
    "duck": DUCK_LOGO,
    "default": DEFAULT_LOGO,
}


def get_logo(name: str) -> str:
    """Get a logo by name (case-insensitive), falling back to the default."""
    return LOGOS.get(name.lower(), DEFAULT_LOGO)
