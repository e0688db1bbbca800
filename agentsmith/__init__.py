"""agentsmith - a single-session chat agent for hosted LLM completion APIs."""

__version__ = "0.1.0"
