"""
Boundary layer for external system integrations.

Handles interactions with the relational store. Model provider clients
live in sales_agent.core.llm.
"""
