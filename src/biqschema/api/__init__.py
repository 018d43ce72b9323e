"""Request/response message shapes.

Operations themselves run elsewhere (server handlers, client SDKs); these
modules only fix the shape of what crosses the wire.

- :mod:`biqschema.api.group`: group management (``GroupAPI``).
- :mod:`biqschema.api.device`: device management and observations (``DeviceAPI``).
"""

from biqschema.api import device as DeviceAPI  # noqa: N812
from biqschema.api import group as GroupAPI  # noqa: N812

__all__ = ["DeviceAPI", "GroupAPI"]
