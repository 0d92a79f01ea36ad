"""
Purpose: Configs for hex geometry, edge probes and the query service.
Dependencies: os (env overrides).
Ext Hooks: Swap HEX_RADIUS/HEX_HEIGHT if the hex model changes.
"""

import os

# Side length of a hex, also center-to-corner distance (world units)
HEX_RADIUS = 2.52
# Height of one discrete layer
HEX_HEIGHT = 0.1282126 * 4

# Edge probe: box centered this far above the edge midpoint
PROBE_LIFT = 1.0
# (right, up, forward) half extents; covers the middle third of the edge
PROBE_HALF_EXTENTS = (HEX_RADIUS / 6, 0.5, 0.1)

DEFAULT_SEARCH_HEIGHT = 1  # -1 is unbounded

SERVER_URL = os.environ.get("HEXPATH_SERVER_URL", "http://localhost:5000")
LOG_LEVEL = os.environ.get("HEXPATH_LOG_LEVEL", "INFO")
