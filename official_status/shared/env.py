"""Resolve ``KEY_FILE`` environment variables into ``KEY``."""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, MutableMapping, Optional

import structlog

logger = structlog.get_logger(__name__)

FILE_SUFFIX = "_FILE"


def resolve_secret_files(
    environ: Optional[MutableMapping[str, str]] = None,
) -> List[str]:
    """
    Expose the contents of Docker-style secret files as plain variables.

    Variables that are already set are left untouched. Unreadable files are
    reported and skipped.

    Returns:
        The names of the variables that were populated.
    """

    env = os.environ if environ is None else environ
    resolved: List[str] = []

    for key, file_path in list(env.items()):
        if not key.endswith(FILE_SUFFIX) or not file_path:
            continue
        target = key[: -len(FILE_SUFFIX)]
        if env.get(target):
            continue
        try:
            env[target] = Path(file_path).read_text(encoding="utf-8").strip()
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning(
                "env.secret_file.unreadable",
                key=key,
                path=file_path,
                error=str(exc),
            )
            continue
        resolved.append(target)

    return resolved
