"""Validate-then-generate entry point.

:func:`generate` is the guarded path from documentation to code: it runs
:func:`~apidocgen.validator.validate` first and refuses to generate when the
result carries errors. Warnings never block generation.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Optional, Union

from apidocgen.codegen import generate_services
from apidocgen.exceptions import GenerationBlockedError
from apidocgen.models import (
    APIDocumentation,
    GeneratorConfig,
    ServiceGenerationResult,
)
from apidocgen.validator import validate

logger = logging.getLogger(__name__)


def generate(
    doc: Union[APIDocumentation, Mapping[str, Any]],
    config: Optional[GeneratorConfig] = None,
) -> ServiceGenerationResult:
    """Validate *doc* and generate code from it.

    Args:
        doc: The documentation, as a model or in its JSON shape.
        config: Generator settings. Defaults to :class:`GeneratorConfig()`.

    Returns:
        The :class:`~apidocgen.models.ServiceGenerationResult`.

    Raises:
        GenerationBlockedError: If validation reports any error. The
            exception's ``result`` holds every diagnostic.
    """
    result = validate(doc)
    if not result.is_valid:
        logger.warning(
            "Generation blocked by %d validation error(s)", len(result.errors)
        )
        raise GenerationBlockedError(result)
    return generate_services(doc, config)
