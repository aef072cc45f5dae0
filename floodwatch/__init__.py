"""Flood Watch - flood risk around a location from live ThaiWater gauges.

- core: pure ranking and classification logic
- shell: HTTP client and configuration loading
- orchestrator: wires the shell to the core for one assessment pass
"""
