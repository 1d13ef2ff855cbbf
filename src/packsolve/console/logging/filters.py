from __future__ import annotations

import logging


PACKSOLVE_FILTER = logging.Filter(name="packsolve")
