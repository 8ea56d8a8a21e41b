"""
MCP (Model Context Protocol) Server Package

This package implements the tool registry and the transports that let MCP
clients drive the todo store.

- Every tool validates its input before touching the store
- One store operation per tool call
"""
