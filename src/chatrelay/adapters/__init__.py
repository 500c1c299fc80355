from .base import BaseChatAdapter
from .mistral import MistralAdapter

__all__ = ["BaseChatAdapter", "MistralAdapter"]
