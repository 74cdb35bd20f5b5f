"""Type definitions for chainlist."""

from typing import TypeVar

# Generic type variable for node payloads
T = TypeVar("T")

# Rendering of the empty sentinel value and of the chain terminator
NULL_REPR = "null"
