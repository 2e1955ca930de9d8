"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from loan_gateway.domain.decision_engine import DecisionEngine


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_decision_engine() -> DecisionEngine:
    """Provide decision engine instance"""
    return DecisionEngine()
