"""Cluster naming helpers."""

APP_NAME = "rook-edgefs-target"


def create_qualified_headless_service_name(replica_num: int, namespace: str, app_name: str = APP_NAME) -> str:
    """Return the headless service DNS name for a target replica.

    e.g. rook-edgefs-target-0.rook-edgefs-target.rook-edgefs
    """
    return f"{app_name}-{replica_num}.{app_name}.{namespace}"
