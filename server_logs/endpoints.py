from fastapi import APIRouter, Query, HTTPException
from pathlib import Path
from datetime import datetime, timezone

from server_logs.base import LEVELS
from server_logs.choose_log_type import LOG_DIR as DEFAULT_LOG_DIR

router = APIRouter(prefix="/admin/logs", tags=["logs"])

LOG_DIR = Path(DEFAULT_LOG_DIR)
ALLOWED_LOG_TYPES = {"server", "upstream"}


def get_log_path(log_type: str) -> Path:
    if log_type not in ALLOWED_LOG_TYPES:
        raise HTTPException(400, f"Invalid log type. Allowed: {sorted(ALLOWED_LOG_TYPES)}")
    return LOG_DIR / f"{log_type}.log"


@router.get("/tail")
def tail_logs(
    log_type: str = Query("server"),
    lines: int = Query(50, ge=1, le=500)
):
    """Get last N lines (like tail command)"""
    log_path = get_log_path(log_type)
    if not log_path.exists():
        return {"lines": [], "error": f"No {log_type} log file"}

    with open(log_path, encoding="utf-8") as f:
        all_lines = f.readlines()
    return {"lines": all_lines[-lines:], "count": len(all_lines), "log_type": log_type}


@router.get("/search")
def search_logs(
    log_type: str = Query("server"),
    level: str = None,
    contains: str = None,
    limit: int = Query(100, ge=1, le=1000)
):
    """Filter records by level and/or a case-insensitive substring."""
    if level and level.upper() not in LEVELS:
        raise HTTPException(400, f"Invalid level. Allowed: {list(LEVELS)}")
    log_path = get_log_path(log_type)
    if not log_path.exists():
        return {"lines": [], "error": f"No {log_type} log file"}

    results = []
    with open(log_path, encoding="utf-8") as f:
        for line in f:
            if level and f'"level": "{level.upper()}"' not in line:
                continue
            if contains and contains.lower() not in line.lower():
                continue
            results.append(line.strip())
            if len(results) >= limit:
                break

    return {"lines": results, "count": len(results), "log_type": log_type}


@router.get("/available")
def list_available_logs():
    if not LOG_DIR.exists():
        return {"logs": []}

    logs = []
    for f in sorted(LOG_DIR.glob("*.log")):
        stat = f.stat()
        logs.append({
            "name": f.stem,
            "size_bytes": stat.st_size,
            "modified": datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc).isoformat()
        })
    return {"logs": logs}
