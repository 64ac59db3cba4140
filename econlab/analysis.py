# MIT License
"""Prose cost explanation from an external LLM.

The derived cost table is formatted into a prompt and sent to an OpenAI
chat model.  The answer is opaque display text: it is never parsed back
into the model.  :class:`AnalysisTask` tracks the request as an explicit
state machine (idle, pending, resolved, failed) and rejects a new request
while one is pending.  Any failure of the service surfaces as a fixed
apology text; nothing is retried.
"""
from __future__ import annotations

import logging
import os
from enum import Enum
from typing import Any, Callable, Optional, Sequence

from openai import OpenAI
from pydantic import BaseModel, Field

from .economics import cost_table_rows
from .params import CapitalConfiguration, EconomicRecord
from .utils import fmt_rate

logger = logging.getLogger(__name__)

ERROR_TEXT = "Sorry, an error occurred while analyzing the data."


class AnalysisUnavailable(RuntimeError):
    """No LLM client is configured."""


class LLMSettings(BaseModel):
    model: str = Field(default_factory=lambda: os.getenv("OPENAI_CHAT_MODEL", "gpt-4o-mini"))
    api_key: Optional[str] = Field(default_factory=lambda: os.getenv("OPENAI_API_KEY"))
    temperature: float = Field(0.2, ge=0.0, le=2.0)
    max_tokens: int = Field(600, ge=1)


def create_client(settings: Optional[LLMSettings] = None) -> Optional[OpenAI]:
    """Return an OpenAI client, or ``None`` when no API key is set."""
    settings = settings or LLMSettings()
    if not settings.api_key:
        return None
    return OpenAI(api_key=settings.api_key)


def format_cost_table(records: Sequence[EconomicRecord]) -> str:
    lines = []
    for row in cost_table_rows(records):
        lines.append(
            f"Labour: {row['labour']}, "
            f"Total Production: {row['total_production']:g}, "
            f"ATC: {fmt_rate(row['average_total_cost'])}, "
            f"MC: {fmt_rate(row['marginal_cost'])}"
        )
    return "\n".join(lines)


def build_cost_prompt(config: CapitalConfiguration, records: Sequence[EconomicRecord]) -> str:
    return f"""As an economist, provide a concise cost analysis for Boom and Crust Pizza based on the following data for their "{config.name}" setup (Fixed Cost: €{config.fixed_cost:g}).

Data:
{format_cost_table(records)}

Explain the U-shape of the Average Total Cost (ATC) curve using precise economic principles.

1.  **Falling ATC:** Explain how spreading fixed costs over more units and the division of labour initially reduce the average cost per pizza.
2.  **Rising ATC:** Explain how the law of diminishing marginal returns eventually causes ATC to rise in the short run due to the fixed capital constraint (one oven).
3.  **Long-Run:** Briefly state that the long-run ATC curve is U-shaped due to economies and diseconomies of scale.

The analysis must be brief, professional, and direct. Avoid conversational or effusive language."""


def explain_costs(
    config: CapitalConfiguration,
    records: Sequence[EconomicRecord],
    client: Any = None,
    settings: Optional[LLMSettings] = None,
) -> str:
    """Ask the chat model to explain the cost curves.

    Raises
    ------
    AnalysisUnavailable
        If no client is given and none can be created.
    """
    settings = settings or LLMSettings()
    client = client or create_client(settings)
    if client is None:
        raise AnalysisUnavailable("OPENAI_API_KEY is not set")
    response = client.chat.completions.create(
        model=settings.model,
        messages=[{"role": "user", "content": build_cost_prompt(config, records)}],
        temperature=settings.temperature,
        max_tokens=settings.max_tokens,
    )
    return (response.choices[0].message.content or "").strip()


class AnalysisStatus(str, Enum):
    IDLE = "idle"
    PENDING = "pending"
    RESOLVED = "resolved"
    FAILED = "failed"


class AnalysisTask:
    """Lifecycle of one cost-explanation request."""

    def __init__(self) -> None:
        self.status = AnalysisStatus.IDLE
        self.text = ""

    @property
    def is_loading(self) -> bool:
        return self.status is AnalysisStatus.PENDING

    def reset(self) -> None:
        self.status = AnalysisStatus.IDLE
        self.text = ""

    def start(self) -> bool:
        """Enter ``pending``; returns False if a request is already pending."""
        if self.status is AnalysisStatus.PENDING:
            logger.warning("Cost analysis already pending; request rejected")
            return False
        self.status = AnalysisStatus.PENDING
        self.text = ""
        return True

    def resolve(self, text: str) -> None:
        self.status = AnalysisStatus.RESOLVED
        self.text = text

    def fail(self) -> None:
        self.status = AnalysisStatus.FAILED
        self.text = ERROR_TEXT

    def run(self, request: Callable[[], str]) -> bool:
        """Start, call ``request`` and settle the task with its outcome.

        Returns False when the request was rejected because another one is
        pending.
        """
        if not self.start():
            return False
        try:
            text = request()
        except Exception:
            logger.exception("Error generating cost analysis")
            self.fail()
        else:
            self.resolve(text)
        return True
