"""Python client for the Lingvo API, including the conversation poller."""

from lingvo.client.api import LingvoAPIError, LingvoClient
from lingvo.client.poller import ConversationPoller

__all__ = ["LingvoAPIError", "LingvoClient", "ConversationPoller"]
