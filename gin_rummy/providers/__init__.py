"""Decision providers for player choices."""

from gin_rummy.providers.base import DecisionProvider
from gin_rummy.providers.interactive import TerminalProvider
from gin_rummy.providers.scripted import ScriptedProvider

__all__ = ["DecisionProvider", "ScriptedProvider", "TerminalProvider"]
