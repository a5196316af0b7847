from .contract import FeedbackContract

__all__ = ["FeedbackContract"]
