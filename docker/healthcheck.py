"""Container healthcheck script: exit 0 if the API answers /health."""

from __future__ import annotations

import os
import sys
import urllib.request

port = os.environ.get("CKD_API_PORT", "3001")

try:
    with urllib.request.urlopen(f"http://localhost:{port}/health", timeout=5) as resp:
        if resp.status == 200:
            sys.exit(0)
except OSError:
    pass

sys.exit(1)
