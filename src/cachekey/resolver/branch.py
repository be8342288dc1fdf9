"""Current-branch detection from CI provider environment variables."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from cachekey.constants.ci import BRANCH_ENV_VARS, GIT_BRANCH_REF_PREFIX

logger = logging.getLogger(__name__)


def detect_branch(environ: Mapping[str, str]) -> str | None:
    """Return the branch exposed by the first CI variable that is set."""
    for name in BRANCH_ENV_VARS:
        value = environ.get(name, "").strip()
        if not value:
            continue
        value = value.removeprefix(GIT_BRANCH_REF_PREFIX)
        logger.debug("Detected branch %s from %s", value, name)
        return value
    return None
