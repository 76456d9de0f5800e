"""Region latency probing."""

from cloudnav.controllers.regions.latency import RegionLatencyProber, tcp_connect_probe

__all__ = ["RegionLatencyProber", "tcp_connect_probe"]
