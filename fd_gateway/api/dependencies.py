"""Dependency injection for FastAPI endpoints"""

from fastapi import Depends, Request
from fd_gateway.domain.advisory import AdvisoryFlow
from fd_gateway.infrastructure.clients.generation import GenerationClient


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_generation_client() -> GenerationClient:
    """Provide text-generation client instance"""
    return GenerationClient()


def get_advisory_flow(generator: GenerationClient = Depends(get_generation_client)) -> AdvisoryFlow:
    """Provide advisory flow wired to the generation client and static reference rates"""
    return AdvisoryFlow(generator)
