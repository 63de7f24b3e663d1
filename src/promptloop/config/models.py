"""Pydantic configuration models with code-baked defaults.

``promptloop.toml`` only needs to contain overrides.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

AnswerType = Literal["line", "int", "float", "bool"]


class AskConfig(BaseModel):
    """[ask] section: defaults for ``promptloop ask``."""

    model_config = {"frozen": True}

    type: AnswerType = "line"
    secret: bool = False
