from .density import truncated_normal_moments, truncated_normal_pdf

__all__ = ["truncated_normal_moments", "truncated_normal_pdf"]
