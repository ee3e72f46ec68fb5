from __future__ import annotations

import logging
import re
from typing import Mapping

logger = logging.getLogger(__name__)

VARIABLE_PATTERN = re.compile(r"\$\{([^{}]+)\}")


def substitute_variables(template: str, variables: Mapping[str, str]) -> str:
    """Replace `${NAME}` placeholders with values from `variables`.

    Unknown placeholders are kept as they are. Substituted values are not
    scanned again.
    """

    def _replace(match: re.Match[str]) -> str:
        name = match.group(1)
        if name not in variables:
            logger.debug("no value for template variable %s", name)
            return match.group(0)
        return str(variables[name])

    return VARIABLE_PATTERN.sub(_replace, template)
