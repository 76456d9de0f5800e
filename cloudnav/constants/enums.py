"""All enum definitions for the TUI.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum, IntEnum

# =============================================================================
# Interaction Modes
# =============================================================================


class Mode(Enum):
    """Interaction modes the dispatcher resolves actions against."""

    NORMAL = "normal"
    SPACE_MENU = "space_menu"
    SERVICE_PICKER = "service_picker"
    COLUMN_SELECTOR = "column_selector"
    FILTER_INPUT = "filter_input"
    EVENT_FILTER_INPUT = "event_filter_input"
    INSIGHTS_INPUT = "insights_input"
    ERROR_MODAL = "error_modal"
    HELP_MODAL = "help_modal"
    REGION_PICKER = "region_picker"
    PROFILE_PICKER = "profile_picker"
    CALENDAR_PICKER = "calendar_picker"
    TAB_PICKER = "tab_picker"
    SESSION_PICKER = "session_picker"
    POLICY_VIEW = "policy_view"


# =============================================================================
# Resource Kinds
# =============================================================================


class ResourceKind(Enum):
    """Browsable resource kinds."""

    LOG_GROUPS = "cloudwatch-log-groups"
    INSIGHTS = "cloudwatch-insights"
    ALARMS = "cloudwatch-alarms"
    S3_BUCKETS = "s3-buckets"
    SQS_QUEUES = "sqs-queues"
    EC2_INSTANCES = "ec2-instances"
    ECR_REPOSITORIES = "ecr-repositories"
    LAMBDA_FUNCTIONS = "lambda-functions"
    LAMBDA_APPLICATIONS = "lambda-applications"
    CLOUDFORMATION_STACKS = "cloudformation-stacks"
    APIGATEWAY_APIS = "apigateway-apis"
    CLOUDTRAIL_EVENTS = "cloudtrail-events"
    IAM_USERS = "iam-users"
    IAM_ROLES = "iam-roles"
    IAM_GROUPS = "iam-groups"


# =============================================================================
# View Behavior
# =============================================================================


class SelectBehavior(Enum):
    """What SELECT does on a view's current row."""

    DRILL = "drill"
    VIEWER = "viewer"
    EXPAND = "expand"
    NONE = "none"


class SortDirection(Enum):
    """Sort direction for list views."""

    ASC = "asc"
    DESC = "desc"

    def toggled(self) -> "SortDirection":
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


class PageSize(IntEnum):
    """Allowed page sizes."""

    TEN = 10
    TWENTY_FIVE = 25
    FIFTY = 50
    ONE_HUNDRED = 100


class FocusKind(Enum):
    """Kinds of focusable filter controls."""

    TEXT = "text"
    DROPDOWN = "dropdown"
    CHECKBOX = "checkbox"
    PAGINATION = "pagination"


class PreferencesSection(Enum):
    """Sections of the column selector."""

    COLUMNS = "columns"
    PAGE_SIZE = "page_size"


# =============================================================================
# Effects and Errors
# =============================================================================


class EffectKind(Enum):
    """Side effects the dispatcher asks the shell to perform."""

    FETCH = "fetch"
    QUIT = "quit"
    PROBE_REGIONS = "probe_regions"
    LOAD_PROFILES = "load_profiles"
    RUN_QUERY = "run_query"
    COPY = "copy"
    COPY_SCREEN = "copy_screen"
    OPEN_CONSOLE = "open_console"


class ErrorKind(Enum):
    """Categories of errors shown in the error modal."""

    FETCH = "fetch"
    CREDENTIALS = "credentials"
    QUERY = "query"


class CalendarField(Enum):
    """Date fields a calendar picker can write back to."""

    START = "start"
    END = "end"


__all__ = [
    "CalendarField",
    "EffectKind",
    "ErrorKind",
    "FocusKind",
    "Mode",
    "PageSize",
    "PreferencesSection",
    "ResourceKind",
    "SelectBehavior",
    "SortDirection",
]
