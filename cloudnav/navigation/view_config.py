"""View catalog - service titles, columns, focus rings and select behavior.

New resource kinds are added by registering their descriptors here; the
dispatcher has no per-kind code.
"""

from __future__ import annotations

from cloudnav.constants.enums import FocusKind, Mode, ResourceKind, SelectBehavior
from cloudnav.constants.values import (
    ALL_OPTION,
    FOCUS_END_DATE,
    FOCUS_EXACT,
    FOCUS_FILTER,
    FOCUS_LOG_GROUPS,
    FOCUS_PAGINATION,
    FOCUS_QUERY,
    FOCUS_SHOW_EXPIRED,
    FOCUS_START_DATE,
    FOCUS_STATE,
    FOCUS_TIME_RANGE,
)
from cloudnav.models.state.focus_ring import FocusTarget
from cloudnav.navigation.views import ViewRegistry, ViewSpec

# =============================================================================
# Focus targets
# =============================================================================

FILTER_TARGET = FocusTarget(FOCUS_FILTER, FocusKind.TEXT)
PAGINATION_TARGET = FocusTarget(FOCUS_PAGINATION, FocusKind.PAGINATION)
EXACT_TARGET = FocusTarget(FOCUS_EXACT, FocusKind.CHECKBOX)
SHOW_EXPIRED_TARGET = FocusTarget(FOCUS_SHOW_EXPIRED, FocusKind.CHECKBOX)
START_DATE_TARGET = FocusTarget(FOCUS_START_DATE, FocusKind.TEXT)
END_DATE_TARGET = FocusTarget(FOCUS_END_DATE, FocusKind.TEXT)

TIME_RANGE_OPTIONS: tuple[str, ...] = ("1h", "5m", "15m", "3h", "12h", "1d", "1w")
TIME_RANGE_TARGET = FocusTarget(FOCUS_TIME_RANGE, FocusKind.DROPDOWN, TIME_RANGE_OPTIONS)

ALARM_STATE_OPTIONS: tuple[str, ...] = (ALL_OPTION, "ALARM", "OK", "INSUFFICIENT_DATA")
INSTANCE_STATE_OPTIONS: tuple[str, ...] = (
    ALL_OPTION,
    "running",
    "pending",
    "stopping",
    "stopped",
    "shutting-down",
    "terminated",
)
STACK_STATUS_OPTIONS: tuple[str, ...] = (
    ALL_OPTION,
    "CREATE_COMPLETE",
    "UPDATE_COMPLETE",
    "ROLLBACK_COMPLETE",
    "UPDATE_ROLLBACK_COMPLETE",
    "DELETE_FAILED",
    "CREATE_FAILED",
)

BASIC_RING: tuple[FocusTarget, ...] = (FILTER_TARGET, PAGINATION_TARGET)


def _status_ring(options: tuple[str, ...]) -> tuple[FocusTarget, ...]:
    return (
        FILTER_TARGET,
        FocusTarget(FOCUS_STATE, FocusKind.DROPDOWN, options),
        PAGINATION_TARGET,
    )


# =============================================================================
# Service titles (menu order)
# =============================================================================

SERVICE_TITLES: list[tuple[ResourceKind, str]] = [
    (ResourceKind.LOG_GROUPS, "CloudWatch > Log Groups"),
    (ResourceKind.INSIGHTS, "CloudWatch > Logs Insights"),
    (ResourceKind.ALARMS, "CloudWatch > Alarms"),
    (ResourceKind.S3_BUCKETS, "S3 > Buckets"),
    (ResourceKind.SQS_QUEUES, "SQS > Queues"),
    (ResourceKind.EC2_INSTANCES, "EC2 > Instances"),
    (ResourceKind.ECR_REPOSITORIES, "ECR > Repositories"),
    (ResourceKind.LAMBDA_FUNCTIONS, "Lambda > Functions"),
    (ResourceKind.LAMBDA_APPLICATIONS, "Lambda > Applications"),
    (ResourceKind.CLOUDFORMATION_STACKS, "CloudFormation > Stacks"),
    (ResourceKind.APIGATEWAY_APIS, "API Gateway > APIs"),
    (ResourceKind.CLOUDTRAIL_EVENTS, "CloudTrail > Event history"),
    (ResourceKind.IAM_USERS, "IAM > Users"),
    (ResourceKind.IAM_ROLES, "IAM > Roles"),
    (ResourceKind.IAM_GROUPS, "IAM > User Groups"),
]

# =============================================================================
# View descriptors
# =============================================================================

VIEW_SPECS: list[ViewSpec] = [
    # CloudWatch log groups -> streams | tags -> events
    ViewSpec(
        ResourceKind.LOG_GROUPS, 0, None, "Log groups",
        columns=("name", "retention", "stored_bytes", "created"),
        sort_columns=("name", "stored_bytes", "created"),
        select=SelectBehavior.DRILL,
        focus_targets=BASIC_RING,
    ),
    ViewSpec(
        ResourceKind.LOG_GROUPS, 1, "streams", "Log streams",
        columns=("name", "last_event", "created"),
        sort_columns=("name", "last_event", "created"),
        select=SelectBehavior.DRILL,
        focus_targets=(FILTER_TARGET, EXACT_TARGET, SHOW_EXPIRED_TARGET, PAGINATION_TARGET),
    ),
    ViewSpec(
        ResourceKind.LOG_GROUPS, 1, "tags", "Tags",
        columns=("name", "value"),
        focus_targets=BASIC_RING,
    ),
    ViewSpec(
        ResourceKind.LOG_GROUPS, 2, None, "Log events",
        columns=("timestamp", "message"),
        sort_columns=("timestamp",),
        select=SelectBehavior.EXPAND,
        focus_targets=BASIC_RING,
        event_focus_targets=(
            FILTER_TARGET,
            TIME_RANGE_TARGET,
            START_DATE_TARGET,
            END_DATE_TARGET,
            PAGINATION_TARGET,
        ),
        server_controls=frozenset({FOCUS_TIME_RANGE, FOCUS_START_DATE, FOCUS_END_DATE}),
    ),
    # CloudWatch Logs Insights query editor
    ViewSpec(
        ResourceKind.INSIGHTS, 0, None, "Query results",
        columns=("timestamp", "message"),
        sort_columns=("timestamp",),
        select=SelectBehavior.EXPAND,
        filter_mode=Mode.INSIGHTS_INPUT,
        focus_targets=(
            FocusTarget(FOCUS_QUERY, FocusKind.TEXT),
            FocusTarget(FOCUS_LOG_GROUPS, FocusKind.TEXT),
            TIME_RANGE_TARGET,
            START_DATE_TARGET,
            END_DATE_TARGET,
        ),
        server_controls=frozenset(
            {FOCUS_QUERY, FOCUS_LOG_GROUPS, FOCUS_TIME_RANGE, FOCUS_START_DATE, FOCUS_END_DATE}
        ),
    ),
    # CloudWatch alarms
    ViewSpec(
        ResourceKind.ALARMS, 0, None, "Alarms",
        columns=("name", "status", "metric", "updated"),
        sort_columns=("name", "status", "updated"),
        select=SelectBehavior.EXPAND,
        focus_targets=_status_ring(ALARM_STATE_OPTIONS),
    ),
    # S3 buckets -> objects (prefix tree) | properties
    ViewSpec(
        ResourceKind.S3_BUCKETS, 0, None, "Buckets",
        columns=("name", "region", "created"),
        sort_columns=("name", "region", "created"),
        select=SelectBehavior.DRILL,
        focus_targets=BASIC_RING,
    ),
    ViewSpec(
        ResourceKind.S3_BUCKETS, 1, "objects", "Objects",
        columns=("name", "size", "modified", "storage_class"),
        sort_columns=("name", "size", "modified"),
        select=SelectBehavior.DRILL,
        tree=True,
        prefix_drill=True,
        focus_targets=BASIC_RING,
    ),
    ViewSpec(
        ResourceKind.S3_BUCKETS, 1, "properties", "Properties",
        columns=("name", "value"),
        focus_targets=BASIC_RING,
    ),
    # SQS queues -> details | queue policies
    ViewSpec(
        ResourceKind.SQS_QUEUES, 0, None, "Queues",
        columns=("name", "type", "messages", "created"),
        sort_columns=("name", "type", "messages"),
        select=SelectBehavior.DRILL,
        focus_targets=BASIC_RING,
    ),
    ViewSpec(
        ResourceKind.SQS_QUEUES, 1, "details", "Details",
        columns=("name", "value"),
        focus_targets=BASIC_RING,
    ),
    ViewSpec(
        ResourceKind.SQS_QUEUES, 1, "queue_policies", "Queue policies",
        columns=("name",),
        select=SelectBehavior.VIEWER,
        focus_targets=BASIC_RING,
    ),
    # EC2 instances -> details | tags
    ViewSpec(
        ResourceKind.EC2_INSTANCES, 0, None, "Instances",
        columns=("name", "status", "instance_id", "instance_type", "availability_zone"),
        sort_columns=("name", "status", "instance_type"),
        select=SelectBehavior.DRILL,
        focus_targets=_status_ring(INSTANCE_STATE_OPTIONS),
    ),
    ViewSpec(
        ResourceKind.EC2_INSTANCES, 1, "details", "Details",
        columns=("name", "value"),
        focus_targets=BASIC_RING,
    ),
    ViewSpec(
        ResourceKind.EC2_INSTANCES, 1, "tags", "Tags",
        columns=("name", "value"),
        focus_targets=BASIC_RING,
    ),
    # ECR repositories -> images
    ViewSpec(
        ResourceKind.ECR_REPOSITORIES, 0, None, "Repositories",
        columns=("name", "uri", "created", "tag_mutability"),
        sort_columns=("name", "created"),
        select=SelectBehavior.DRILL,
        focus_targets=BASIC_RING,
    ),
    ViewSpec(
        ResourceKind.ECR_REPOSITORIES, 1, None, "Images",
        columns=("name", "digest", "pushed", "size"),
        sort_columns=("name", "pushed", "size"),
        select=SelectBehavior.EXPAND,
        focus_targets=BASIC_RING,
    ),
    # Lambda functions -> code | configuration | versions | aliases
    ViewSpec(
        ResourceKind.LAMBDA_FUNCTIONS, 0, None, "Functions",
        columns=("name", "runtime", "memory", "last_modified"),
        sort_columns=("name", "runtime", "last_modified"),
        select=SelectBehavior.DRILL,
        focus_targets=BASIC_RING,
    ),
    ViewSpec(
        ResourceKind.LAMBDA_FUNCTIONS, 1, "code", "Code",
        columns=("name", "size"),
        select=SelectBehavior.VIEWER,
        focus_targets=BASIC_RING,
    ),
    ViewSpec(
        ResourceKind.LAMBDA_FUNCTIONS, 1, "configuration", "Configuration",
        columns=("name", "value"),
        focus_targets=BASIC_RING,
    ),
    ViewSpec(
        ResourceKind.LAMBDA_FUNCTIONS, 1, "versions", "Versions",
        columns=("name", "description", "last_modified"),
        select=SelectBehavior.EXPAND,
        focus_targets=BASIC_RING,
    ),
    ViewSpec(
        ResourceKind.LAMBDA_FUNCTIONS, 1, "aliases", "Aliases",
        columns=("name", "version", "description"),
        select=SelectBehavior.EXPAND,
        focus_targets=BASIC_RING,
    ),
    # Lambda applications -> overview | deployments
    ViewSpec(
        ResourceKind.LAMBDA_APPLICATIONS, 0, None, "Applications",
        columns=("name", "status", "last_modified"),
        sort_columns=("name", "status", "last_modified"),
        select=SelectBehavior.DRILL,
        focus_targets=BASIC_RING,
    ),
    ViewSpec(
        ResourceKind.LAMBDA_APPLICATIONS, 1, "overview", "Resources",
        columns=("name", "type", "status"),
        select=SelectBehavior.EXPAND,
        focus_targets=BASIC_RING,
    ),
    ViewSpec(
        ResourceKind.LAMBDA_APPLICATIONS, 1, "deployments", "Deployments",
        columns=("name", "status", "updated"),
        select=SelectBehavior.EXPAND,
        focus_targets=BASIC_RING,
    ),
    # CloudFormation stacks -> info | events | resources | outputs | parameters | template
    ViewSpec(
        ResourceKind.CLOUDFORMATION_STACKS, 0, None, "Stacks",
        columns=("name", "status", "created", "description"),
        sort_columns=("name", "status", "created"),
        select=SelectBehavior.DRILL,
        focus_targets=_status_ring(STACK_STATUS_OPTIONS),
    ),
    ViewSpec(
        ResourceKind.CLOUDFORMATION_STACKS, 1, "stack_info", "Stack info",
        columns=("name", "value"),
        focus_targets=BASIC_RING,
    ),
    ViewSpec(
        ResourceKind.CLOUDFORMATION_STACKS, 1, "events", "Events",
        columns=("timestamp", "name", "status", "reason"),
        sort_columns=("timestamp",),
        select=SelectBehavior.EXPAND,
        focus_targets=BASIC_RING,
    ),
    ViewSpec(
        ResourceKind.CLOUDFORMATION_STACKS, 1, "resources", "Resources",
        columns=("name", "physical_id", "type", "status"),
        select=SelectBehavior.EXPAND,
        focus_targets=BASIC_RING,
    ),
    ViewSpec(
        ResourceKind.CLOUDFORMATION_STACKS, 1, "outputs", "Outputs",
        columns=("name", "value", "description"),
        focus_targets=BASIC_RING,
    ),
    ViewSpec(
        ResourceKind.CLOUDFORMATION_STACKS, 1, "parameters", "Parameters",
        columns=("name", "value"),
        focus_targets=BASIC_RING,
    ),
    ViewSpec(
        ResourceKind.CLOUDFORMATION_STACKS, 1, "template", "Template",
        columns=("name",),
        select=SelectBehavior.VIEWER,
        focus_targets=BASIC_RING,
    ),
    # API Gateway APIs -> resource tree | stages
    ViewSpec(
        ResourceKind.APIGATEWAY_APIS, 0, None, "APIs",
        columns=("name", "description", "api_id", "protocol", "endpoint_type", "created"),
        sort_columns=("name", "protocol", "created"),
        select=SelectBehavior.DRILL,
        focus_targets=BASIC_RING,
    ),
    ViewSpec(
        ResourceKind.APIGATEWAY_APIS, 1, "resources", "Resources",
        columns=("name", "methods", "resource_id"),
        tree=True,
        focus_targets=BASIC_RING,
    ),
    ViewSpec(
        ResourceKind.APIGATEWAY_APIS, 1, "stages", "Stages",
        columns=("name", "deployment", "updated"),
        sort_columns=("name", "updated"),
        focus_targets=BASIC_RING,
    ),
    # CloudTrail event history -> resources | event record
    ViewSpec(
        ResourceKind.CLOUDTRAIL_EVENTS, 0, None, "Event history",
        columns=("name", "event_time", "username", "event_source", "resource_name"),
        sort_columns=("event_time", "name", "username", "event_source"),
        select=SelectBehavior.DRILL,
        focus_targets=BASIC_RING,
    ),
    ViewSpec(
        ResourceKind.CLOUDTRAIL_EVENTS, 1, "resources", "Resources referenced",
        columns=("name", "resource_type", "timeline"),
        focus_targets=BASIC_RING,
    ),
    ViewSpec(
        ResourceKind.CLOUDTRAIL_EVENTS, 1, "event_record", "Event record",
        columns=("name",),
        select=SelectBehavior.VIEWER,
        focus_targets=BASIC_RING,
    ),
    # IAM users -> permissions | groups | tags
    ViewSpec(
        ResourceKind.IAM_USERS, 0, None, "Users",
        columns=("name", "path", "created", "last_activity"),
        sort_columns=("name", "created"),
        select=SelectBehavior.DRILL,
        focus_targets=BASIC_RING,
    ),
    ViewSpec(
        ResourceKind.IAM_USERS, 1, "permissions", "Permissions",
        columns=("name", "type"),
        select=SelectBehavior.VIEWER,
        focus_targets=BASIC_RING,
    ),
    ViewSpec(
        ResourceKind.IAM_USERS, 1, "groups", "Groups",
        columns=("name", "attached_policies"),
        focus_targets=BASIC_RING,
    ),
    ViewSpec(
        ResourceKind.IAM_USERS, 1, "tags", "Tags",
        columns=("name", "value"),
        focus_targets=BASIC_RING,
    ),
    # IAM roles -> permissions | trust relationships | tags
    ViewSpec(
        ResourceKind.IAM_ROLES, 0, None, "Roles",
        columns=("name", "trusted_entities", "created"),
        sort_columns=("name", "created"),
        select=SelectBehavior.DRILL,
        focus_targets=BASIC_RING,
    ),
    ViewSpec(
        ResourceKind.IAM_ROLES, 1, "permissions", "Permissions",
        columns=("name", "type"),
        select=SelectBehavior.VIEWER,
        focus_targets=BASIC_RING,
    ),
    ViewSpec(
        ResourceKind.IAM_ROLES, 1, "trust_relationships", "Trust relationships",
        columns=("name",),
        select=SelectBehavior.VIEWER,
        focus_targets=BASIC_RING,
    ),
    ViewSpec(
        ResourceKind.IAM_ROLES, 1, "tags", "Tags",
        columns=("name", "value"),
        focus_targets=BASIC_RING,
    ),
    # IAM user groups -> permissions | users
    ViewSpec(
        ResourceKind.IAM_GROUPS, 0, None, "User groups",
        columns=("name", "users", "created"),
        sort_columns=("name", "created"),
        select=SelectBehavior.DRILL,
        focus_targets=BASIC_RING,
    ),
    ViewSpec(
        ResourceKind.IAM_GROUPS, 1, "permissions", "Permissions",
        columns=("name", "type"),
        select=SelectBehavior.VIEWER,
        focus_targets=BASIC_RING,
    ),
    ViewSpec(
        ResourceKind.IAM_GROUPS, 1, "users", "Users",
        columns=("name", "created"),
        focus_targets=BASIC_RING,
    ),
]


def build_registry() -> ViewRegistry:
    """Registry populated with every service and view in this module."""
    registry = ViewRegistry()
    for kind, title in SERVICE_TITLES:
        registry.register_service(kind, title)
    for spec in VIEW_SPECS:
        registry.register(spec)
    return registry


__all__ = [
    "ALARM_STATE_OPTIONS",
    "BASIC_RING",
    "INSTANCE_STATE_OPTIONS",
    "SERVICE_TITLES",
    "STACK_STATUS_OPTIONS",
    "TIME_RANGE_OPTIONS",
    "VIEW_SPECS",
    "build_registry",
]
