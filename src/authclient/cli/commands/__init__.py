"""CLI commands for authclient."""

from .call import call
from .tokens import tokens

__all__ = ["call", "tokens"]
