from selectorkit.jsonbridge.bridge import from_json, get_json
from selectorkit.jsonbridge.capabilities import Capabilities
from selectorkit.jsonbridge.errors import ParseError
from selectorkit.jsonbridge.hydrated import Hydrated, capabilities_of, unwrap

__all__ = [
    "get_json",
    "from_json",
    "Capabilities",
    "ParseError",
    "Hydrated",
    "capabilities_of",
    "unwrap",
]
