"""Text-generation HTTP client for advisory messages"""

import json
import httpx
from typing import Any, Dict
from pydantic import BaseModel, ValidationError

from fd_gateway.domain.models import AdvisoryContext
from fd_gateway.domain.exceptions import AdvisoryUnavailableError
from fd_gateway.config import settings
from fd_gateway.infrastructure.observability.metrics import (
    generation_latency_histogram,
    generation_failure_counter,
)

ADVISOR_SYSTEM_PROMPT = """You are an expert financial advisor reviewing a fixed deposit calculation \
that an automated check has flagged as unusual.

The user's interest rate differs from the prevailing rate for the tenure, or the calculated \
maturity amount is far from a simple-interest estimate (principal * (1 + rate/100 * tenure)).

Write ONE short, polite sentence suggesting which inputs the user should double-check. \
If after reviewing the figures nothing looks wrong, answer with an empty message.

Example: "The calculated maturity amount seems unusually high. Please double-check the \
interest rate and period you entered, as they may not be accurate."

Respond only with a JSON object of the form {"advisoryMessage": "<message or empty string>"}."""

DEPOSIT_DETAILS_TEMPLATE = """Fixed deposit details:
- FD Amount: {principal:.2f}
- Interest Rate: {annual_rate_percent}%
- Period: {tenure_years} years
- Calculated Maturity Amount: {maturity_amount:.2f}
- Prevailing Interest Rate for this period: {reference_rate_percent}%
- Simple-interest estimate: {simple_estimate:.2f}"""


class GenerationOutput(BaseModel):
    """Structured response expected from the model"""

    advisoryMessage: str


def render_prompt(context: AdvisoryContext) -> str:
    """Fill the deposit details template from an AdvisoryContext"""
    return DEPOSIT_DETAILS_TEMPLATE.format(
        principal=context.principal,
        annual_rate_percent=context.annual_rate_percent,
        tenure_years=context.tenure_years,
        maturity_amount=context.maturity_amount,
        reference_rate_percent=context.reference_rate_percent,
        simple_estimate=context.simple_estimate,
    )


class GenerationClient:
    """Client for an Ollama-compatible chat endpoint"""

    def __init__(
        self,
        base_url: str | None = None,
        model: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = (base_url or settings.generation_api_base).rstrip("/")
        self.model = model or settings.generation_model
        self.timeout = timeout if timeout is not None else settings.http_timeout_seconds
        self.transport = transport

    def build_payload(self, context: AdvisoryContext) -> Dict[str, Any]:
        return {
            "model": self.model,
            "messages": [
                {"role": "system", "content": ADVISOR_SYSTEM_PROMPT},
                {"role": "user", "content": render_prompt(context)},
            ],
            "stream": False,
            "format": "json",
            "options": {"temperature": settings.generation_temperature},
        }

    async def generate_advisory(self, context: AdvisoryContext) -> str:
        """
        Ask the model for a one-sentence caution about the deposit inputs.

        Returns the advisory text; an empty string means the model found
        nothing worth flagging.

        Raises:
            AdvisoryUnavailableError: On timeout, HTTP errors, or malformed response
        """
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                with generation_latency_histogram.time():
                    response = await client.post(
                        f"{self.base_url}/api/chat",
                        json=self.build_payload(context),
                    )
                response.raise_for_status()
                data = response.json()

                content = data["message"]["content"]
                output = GenerationOutput.model_validate(json.loads(content))
                return output.advisoryMessage

            except httpx.TimeoutException as e:
                generation_failure_counter.inc()
                raise AdvisoryUnavailableError(f"Generation service timeout after {self.timeout}s") from e
            except httpx.HTTPStatusError as e:
                generation_failure_counter.inc()
                raise AdvisoryUnavailableError(f"Generation service error: {e.response.status_code}") from e
            except httpx.RequestError as e:
                generation_failure_counter.inc()
                raise AdvisoryUnavailableError(f"Generation service unreachable: {e}") from e
            except (KeyError, TypeError, ValueError, ValidationError) as e:
                generation_failure_counter.inc()
                raise AdvisoryUnavailableError(f"Malformed response from generation service: {e}") from e
