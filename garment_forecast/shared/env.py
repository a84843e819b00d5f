"""Resolve Docker-style ``*_FILE`` secret variables into the environment."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, MutableMapping, Optional

logger = logging.getLogger(__name__)

SECRET_SUFFIX = "_FILE"


def load_secret_file_variables(
    environ: Optional[MutableMapping[str, str]] = None,
) -> List[str]:
    """
    Expose the content of every ``KEY_FILE`` file as ``KEY``.

    Typical use is ``DB_MONGO_URI_FILE=/run/secrets/mongo_uri`` so the Mongo
    credentials never appear in the container environment. A variable that
    is already set wins over its file. Unreadable files are logged and
    skipped.

    Returns:
        Names of the variables that were populated.
    """
    env = os.environ if environ is None else environ
    resolved: List[str] = []

    for key, file_path in list(env.items()):
        if not key.endswith(SECRET_SUFFIX) or not file_path:
            continue
        target_key = key[: -len(SECRET_SUFFIX)]
        if env.get(target_key):
            continue

        log_extra = {"key": key, "path": file_path}
        try:
            env[target_key] = Path(file_path).read_text(encoding="utf-8").strip()
        except FileNotFoundError as exc:
            logger.warning(
                "env.secret_file.missing", extra={**log_extra, "error": str(exc)}
            )
            continue
        except UnicodeDecodeError as exc:
            logger.warning(
                "env.secret_file.decode_failed", extra={**log_extra, "error": str(exc)}
            )
            continue
        except OSError as exc:
            logger.warning(
                "env.secret_file.load_failed", extra={**log_extra, "error": str(exc)}
            )
            continue
        resolved.append(target_key)

    return resolved


load_secret_file_variables()
