"""Review insights domain service."""

import math

import logfire

from market.domain.error import NotFoundError
from market.domain.model.review import Review, ReviewInsights
from market.domain.repository import ReviewRepository, VendorRepository
from market.domain.value import Sentiment, VendorId

from .base import Service

# Most recent published reviews considered per vendor
INSIGHTS_SAMPLE_SIZE = 100


def summarize_reviews(vendor_id: VendorId, reviews: list[Review]) -> ReviewInsights:
    """Aggregate reviews into rating breakdown, sentiment and summary."""
    breakdown = {str(stars): 0 for stars in range(5, 0, -1)}

    if not reviews:
        return ReviewInsights(
            vendor_id=vendor_id,
            summary="No reviews yet",
            sentiment=Sentiment.NEUTRAL,
            total_reviews=0,
            average_rating=0.0,
            percentage_satisfied=0,
            rating_breakdown=breakdown,
        )

    for review in reviews:
        breakdown[str(review.rating)] += 1

    average = sum(r.rating for r in reviews) / len(reviews)

    if average >= 4:
        sentiment = Sentiment.POSITIVE
    elif average >= 3:
        sentiment = Sentiment.NEUTRAL
    else:
        sentiment = Sentiment.NEGATIVE

    return ReviewInsights(
        vendor_id=vendor_id,
        summary=f"Based on {len(reviews)} reviews with an average rating of "
        f"{average:.1f} stars",
        sentiment=sentiment,
        total_reviews=len(reviews),
        average_rating=round(average, 2),
        # Rounds half up
        percentage_satisfied=math.floor(average / 5 * 100 + 0.5),
        rating_breakdown=breakdown,
    )


class ReviewService(Service):
    """Domain service for vendor review aggregation."""

    def __init__(
        self,
        review_repository: ReviewRepository,
        vendor_repository: VendorRepository,
    ) -> None:
        self.review_repository = review_repository
        self.vendor_repository = vendor_repository

    async def get_insights(self, vendor_id: VendorId) -> ReviewInsights:
        """Aggregate a vendor's recent published reviews.

        Raises:
            NotFoundError: If the vendor does not exist
        """
        with logfire.span("review_service.get_insights", vendor_id=str(vendor_id)):
            vendor = await self.vendor_repository.find_by_id(vendor_id)
            if vendor is None:
                raise NotFoundError("Vendor", str(vendor_id))

            reviews = await self.review_repository.find_published_by_vendor(
                vendor_id, limit=INSIGHTS_SAMPLE_SIZE
            )
            insights = summarize_reviews(vendor_id, reviews)

            logfire.info(
                "Generated review insights",
                vendor_id=str(vendor_id),
                total_reviews=insights.total_reviews,
            )
            return insights
