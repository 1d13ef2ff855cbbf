from __future__ import annotations

import re


_COMPLETE_VERSION = r"v?(\d+)(?:\.(\d+))?(?:\.(\d+))?(?:\.(\d+))?"

COMPLETE_VERSION = re.compile(f"(?i)^{_COMPLETE_VERSION}$")

# [1.0], (1.0,2.0], [1.0,), (,2.0) ...
INTERVAL_CONSTRAINT = re.compile(
    r"^(?P<open>[\[(])\s*(?P<min>[^,\s\])]*)\s*"
    r"(?:(?P<comma>,)\s*(?P<max>[^,\s\])]*)\s*)?(?P<close>[\])])$"
)
