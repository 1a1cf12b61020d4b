import json
from typing import Any

from .color import Colorati
from .representation import ColorRepresentation


class ColorEncoder(json.JSONEncoder):
    """
    JSON encoder for colors.

    A representation encodes as its bare CSS string (or integer ANSI code); a
    Colorati encodes as a mapping of space name to that form.

    >>> json.dumps(Colorati((255, 0, 0)).rgb, cls=ColorEncoder)
    '"rgb(255 0 0 / 1)"'
    """

    def default(self, o: Any) -> Any:
        if isinstance(o, (ColorRepresentation, Colorati)):
            return o.to_json()
        return super().default(o)
