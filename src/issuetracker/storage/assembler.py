"""Fold flat issue/label join rows into nested issue dictionaries"""

from typing import Any, Dict, Iterable, List, Mapping


def build_issues(rows: Iterable[Mapping[str, Any]]) -> List[Dict[str, Any]]:
    """Collapse one-row-per-(issue, label) results into one dict per issue.

    Issues keep the order in which their first row appears; labels are
    appended in row order. Rows for an issue without labels carry ``None``
    label columns and contribute no label. ``assignee`` is ``None`` when the
    row has no ``assignee_id``.
    """
    issues: Dict[str, Dict[str, Any]] = {}

    for row in rows:
        issue = issues.get(row["id"])
        if issue is None:
            issue = {
                "id": row["id"],
                "title": row["title"],
                "description": row["description"],
                "status": row["status"],
                "priority": row["priority"],
                "creator": {
                    "id": row["creator_id"],
                    "name": row["creator_name"] or "",
                },
                "assignee": (
                    {"id": row["assignee_id"], "name": row["assignee_name"] or ""}
                    if row["assignee_id"]
                    else None
                ),
                "labels": [],
                "created_at": row["created_at"],
                "updated_at": row["updated_at"],
            }
            issues[row["id"]] = issue

        if row["label_id"]:
            issue["labels"].append({
                "id": row["label_id"],
                "name": row["label_name"] or "",
                "color": row["label_color"] or "",
            })

    return list(issues.values())
