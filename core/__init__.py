"""
Core pathing engine: hex math, level grid, collision probes and AI queries.

Nothing in here renders or touches the network.
"""
