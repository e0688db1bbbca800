"""Conversation state, agent orchestration and configuration."""
