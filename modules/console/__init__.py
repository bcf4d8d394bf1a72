"""
Console Module.

Interactive operator console for the MIG API.

Architecture:
- client.py   fetches the dashboard collection over HTTP (httpx)
- decoder.py  types the loosely shaped collection fields (pydantic)
- report.py   formats the agent summary and latest actions blocks
- session.py  renders the report, then runs the prompt loop with a
              SIGINT watcher that terminates the process

Usage:
    migconsole
    migconsole -c ~/.migconsole --api-url http://localhost:1664/api/v1/
"""

__version__ = "0.1.0"
