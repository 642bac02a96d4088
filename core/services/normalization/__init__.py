"""Normalization of backend replies into the canonical answer model."""
from core.services.normalization.shape_reconciler import RawCandidate, ShapeReconciler, stringify_payload
from core.services.normalization.response_validator import ResponseValidator
from core.services.normalization.response_parser import ResponseParser, response_parser

__all__ = [
    "RawCandidate",
    "ShapeReconciler",
    "stringify_payload",
    "ResponseValidator",
    "ResponseParser",
    "response_parser",
]
