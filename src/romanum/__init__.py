"""romanum — strict Roman numeral <-> Arabic integer converter.

Validates Roman numerals against the classical composition rules and
encodes integers into their canonical Roman spelling.
"""

from romanum.version import __version__

__all__: list[str] = ["__version__"]
