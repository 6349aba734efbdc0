from application.review.loop import FieldReviewOutcome, ReviewLoop

__all__ = ["FieldReviewOutcome", "ReviewLoop"]
