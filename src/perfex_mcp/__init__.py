"""
Perfex CRM MCP Server.

Exposes the Perfex CRM REST API as MCP tools and a customer search resource.
"""

__version__ = "0.2.0"

SERVER_NAME = "perfex-crm"
