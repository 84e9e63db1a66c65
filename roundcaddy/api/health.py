import platform
import time
from typing import Any, Dict

from roundcaddy import __version__


async def health() -> Dict[str, Any]:
    return {
        "status": "ok",
        "version": __version__,
        "ts": time.time(),
        "runtime": {
            "python": platform.python_version(),
        },
    }
