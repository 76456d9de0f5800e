"""Region catalog constants.

Display name, code, geographic group and opt-in flag for every region the
region picker offers.
"""

from typing import Final

# ============================================================================
# Region catalog (name, code, group, opt_in)
# ============================================================================

REGIONS: Final[tuple[tuple[str, str, str, bool], ...]] = (
    ("N. Virginia", "us-east-1", "United States", False),
    ("Ohio", "us-east-2", "United States", False),
    ("N. California", "us-west-1", "United States", False),
    ("Oregon", "us-west-2", "United States", False),
    ("Cape Town", "af-south-1", "Africa", True),
    ("Hong Kong", "ap-east-1", "Asia Pacific", True),
    ("Hyderabad", "ap-south-2", "Asia Pacific", True),
    ("Jakarta", "ap-southeast-3", "Asia Pacific", True),
    ("Malaysia", "ap-southeast-5", "Asia Pacific", True),
    ("Melbourne", "ap-southeast-4", "Asia Pacific", True),
    ("Mumbai", "ap-south-1", "Asia Pacific", False),
    ("New Zealand", "ap-southeast-6", "Asia Pacific", True),
    ("Osaka", "ap-northeast-3", "Asia Pacific", False),
    ("Seoul", "ap-northeast-2", "Asia Pacific", False),
    ("Singapore", "ap-southeast-1", "Asia Pacific", False),
    ("Sydney", "ap-southeast-2", "Asia Pacific", False),
    ("Taipei", "ap-east-2", "Asia Pacific", True),
    ("Thailand", "ap-southeast-7", "Asia Pacific", True),
    ("Tokyo", "ap-northeast-1", "Asia Pacific", False),
    ("Central", "ca-central-1", "Canada", False),
    ("Calgary", "ca-west-1", "Canada West", True),
    ("Frankfurt", "eu-central-1", "Europe", False),
    ("Ireland", "eu-west-1", "Europe", False),
    ("London", "eu-west-2", "Europe", False),
    ("Milan", "eu-south-1", "Europe", True),
    ("Paris", "eu-west-3", "Europe", False),
    ("Spain", "eu-south-2", "Europe", True),
    ("Stockholm", "eu-north-1", "Europe", False),
    ("Zurich", "eu-central-2", "Europe", True),
    ("Tel Aviv", "il-central-1", "Israel", True),
    ("Central", "mx-central-1", "Mexico", True),
    ("Bahrain", "me-south-1", "Middle East", True),
    ("UAE", "me-central-1", "Middle East", True),
    ("São Paulo", "sa-east-1", "South America", False),
)

REGION_CODES: Final[tuple[str, ...]] = tuple(code for _, code, _, _ in REGIONS)

# Host probed when measuring latency to a region.
PROBE_HOST_TEMPLATE: Final = "s3.{region}.amazonaws.com"
PROBE_PORT: Final = 443

__all__ = [
    "PROBE_HOST_TEMPLATE",
    "PROBE_PORT",
    "REGIONS",
    "REGION_CODES",
]
