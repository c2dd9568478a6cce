"""Notification adapters for telling members about loan activity.

Implementations support multiple output channels:
- Stdout (terminal print)
- Markdown file (append to a loan log)
- Webhook (HTTP POST per event)
"""
