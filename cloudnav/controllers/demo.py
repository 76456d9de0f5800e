"""Offline demo catalog.

Populates a ``StaticDataSource`` with a small, deterministic set of
resources so the shell can run without cloud credentials.
"""

from __future__ import annotations

import json

from cloudnav.constants.enums import ResourceKind
from cloudnav.controllers.static_source import StaticDataSource
from cloudnav.models.core.resources import ResourceItem

_POLICY = {
    "Version": "2012-10-17",
    "Statement": [{"Effect": "Allow", "Action": "sqs:SendMessage", "Resource": "*"}],
}


def _item(key: str, name: str = "", status: str = "", **attributes: str) -> ResourceItem:
    return ResourceItem(key=key, name=name, status=status, attributes=attributes)


def _pairs(values: dict[str, str]) -> list[ResourceItem]:
    return [_item(key, value=value) for key, value in values.items()]


def _log_groups(source: StaticDataSource) -> None:
    kind = ResourceKind.LOG_GROUPS
    groups = [
        _item(
            f"/aws/lambda/service-{index:02d}",
            retention="30 days",
            stored_bytes=str(index * 1024),
            created="2024-01-01",
        )
        for index in range(1, 24)
    ]
    source.add_list(kind, groups)
    for group in groups[:3]:
        parents = (group.key,)
        streams = [
            _item(
                f"2024/05/{day:02d}/[$LATEST]{day:04x}",
                last_event=f"2024-05-{day:02d}T12:00:00",
                created=f"2024-05-{day:02d}",
                expired="true" if day < 3 else "false",
            )
            for day in range(1, 8)
        ]
        source.add_list(kind, streams, parents=parents, sub_tab="streams")
        source.add_list(
            kind, _pairs({"team": "platform", "env": "dev"}), parents=parents, sub_tab="tags"
        )
        for stream in streams:
            events = [
                _item(
                    f"{stream.key}#{n}",
                    timestamp=f"2024-05-01T12:00:{n:02d}",
                    message=f"request {n} handled",
                )
                for n in range(12)
            ]
            source.add_list(kind, events, parents=(group.key, stream.key))


def _buckets(source: StaticDataSource) -> None:
    kind = ResourceKind.S3_BUCKETS
    buckets = [
        _item(name, region="us-east-1", created="2023-11-02")
        for name in ("assets", "backups", "logs")
    ]
    source.add_list(kind, buckets)
    for bucket in buckets:
        parents = (bucket.key,)
        source.add_list(
            kind,
            [
                ResourceItem(key="a/", is_branch=True),
                ResourceItem(
                    key="readme.txt", attributes={"size": "120", "storage_class": "STANDARD"}
                ),
            ],
            parents=parents,
            sub_tab="objects",
        )
        source.add_children(kind, "a/", [ResourceItem(key="a/b/", is_branch=True)], parents=parents)
        source.add_children(
            kind,
            "a/b/",
            [ResourceItem(key="a/b/c.txt", attributes={"size": "42", "storage_class": "STANDARD"})],
            parents=parents,
        )
        source.add_list(
            kind,
            _pairs({"versioning": "Enabled", "encryption": "AES256"}),
            parents=parents,
            sub_tab="properties",
        )


def _alarms(source: StaticDataSource) -> None:
    source.add_list(
        ResourceKind.ALARMS,
        [
            _item("cpu-high", status="ALARM", metric="CPUUtilization", updated="2024-05-01"),
            _item("disk-low", status="OK", metric="FreeStorageSpace", updated="2024-04-12"),
            _item("errors", status="INSUFFICIENT_DATA", metric="Errors", updated="2024-03-30"),
        ],
    )


def _queues(source: StaticDataSource) -> None:
    kind = ResourceKind.SQS_QUEUES
    queues = [
        _item("orders", type="Standard", messages="12"),
        _item("orders.fifo", type="FIFO", messages="0"),
    ]
    source.add_list(kind, queues)
    for queue in queues:
        parents = (queue.key,)
        source.add_list(
            kind,
            _pairs({"visibility_timeout": "30", "retention": "4 days"}),
            parents=parents,
            sub_tab="details",
        )
        policy = ResourceItem(
            key="policy", name="Access policy", document=json.dumps(_POLICY, indent=2)
        )
        source.add_list(kind, [policy], parents=parents, sub_tab="queue_policies")


def _instances(source: StaticDataSource) -> None:
    source.add_list(
        ResourceKind.EC2_INSTANCES,
        [
            _item(
                "i-0a1",
                name="web-1",
                status="running",
                instance_id="i-0a1",
                instance_type="t3.small",
                availability_zone="us-east-1a",
            ),
            _item(
                "i-0b2",
                name="web-2",
                status="stopped",
                instance_id="i-0b2",
                instance_type="t3.small",
                availability_zone="us-east-1b",
            ),
        ],
    )


def _apis(source: StaticDataSource) -> None:
    kind = ResourceKind.APIGATEWAY_APIS
    apis = [
        _item(
            "a1b2c3",
            name="orders-api",
            description="Order service",
            api_id="a1b2c3",
            protocol="REST",
            endpoint_type="REGIONAL",
            created="2024-02-10",
        ),
        _item(
            "d4e5f6",
            name="chat-api",
            description="Websocket chat",
            api_id="d4e5f6",
            protocol="WEBSOCKET",
            endpoint_type="REGIONAL",
            created="2024-03-22",
        ),
    ]
    source.add_list(kind, apis)
    for api in apis:
        parents = (api.key,)
        source.add_list(
            kind,
            [
                ResourceItem(
                    key="/orders/",
                    is_branch=True,
                    attributes={"methods": "GET, POST", "resource_id": "r1"},
                ),
                ResourceItem(key="/health", attributes={"methods": "GET", "resource_id": "r2"}),
            ],
            parents=parents,
            sub_tab="resources",
        )
        source.add_children(
            kind,
            "/orders/",
            [
                ResourceItem(
                    key="/orders/{id}/",
                    is_branch=True,
                    attributes={"methods": "GET, DELETE", "resource_id": "r3"},
                )
            ],
            parents=parents,
        )
        source.add_children(
            kind,
            "/orders/{id}/",
            [ResourceItem(key="/orders/{id}/items", attributes={"methods": "GET", "resource_id": "r4"})],
            parents=parents,
        )
        source.add_list(
            kind,
            [
                _item("prod", deployment="dep-7", updated="2024-05-01"),
                _item("dev", deployment="dep-9", updated="2024-05-03"),
            ],
            parents=parents,
            sub_tab="stages",
        )


def _trail_events(source: StaticDataSource) -> None:
    kind = ResourceKind.CLOUDTRAIL_EVENTS
    events = [
        _item(
            "evt-0001",
            name="ConsoleLogin",
            event_time="2024-05-01T08:00:00Z",
            username="alice",
            event_source="signin.amazonaws.com",
            resource_name="",
        ),
        _item(
            "evt-0002",
            name="PutObject",
            event_time="2024-05-01T08:05:00Z",
            username="deploy-bot",
            event_source="s3.amazonaws.com",
            resource_name="assets",
        ),
        _item(
            "evt-0003",
            name="RunInstances",
            event_time="2024-05-01T09:30:00Z",
            username="alice",
            event_source="ec2.amazonaws.com",
            resource_name="i-0a1",
        ),
    ]
    source.add_list(kind, events)
    for event in events:
        parents = (event.key,)
        resource = event.attributes["resource_name"]
        referenced = []
        if resource:
            referenced.append(
                _item(resource, resource_type=event.attributes["event_source"], timeline="view")
            )
        source.add_list(kind, referenced, parents=parents, sub_tab="resources")
        record = {
            "eventID": event.key,
            "eventName": event.name,
            "eventTime": event.attributes["event_time"],
            "eventSource": event.attributes["event_source"],
            "userIdentity": {"userName": event.attributes["username"]},
        }
        source.add_list(
            kind,
            [ResourceItem(key="record", name="Event record", document=json.dumps(record, indent=2))],
            parents=parents,
            sub_tab="event_record",
        )


def _insights(source: StaticDataSource) -> None:
    results = [
        _item(f"result-{n}", timestamp=f"2024-05-01T00:00:{n:02d}", message=f"ERROR timeout {n}")
        for n in range(5)
    ]
    source.set_query_results(results, polls_needed=2)


def build_demo_source(delay_seconds: float = 0.2) -> StaticDataSource:
    """Static data source holding the demo catalog."""
    source = StaticDataSource(delay_seconds=delay_seconds)
    for populate in (
        _log_groups,
        _buckets,
        _alarms,
        _queues,
        _instances,
        _apis,
        _trail_events,
        _insights,
    ):
        populate(source)
    return source


__all__ = ["build_demo_source"]
